"""Tests for parsing Taskwarrior output."""

from taskwarrior_web import (
    NONE_CONTEXT,
    TaskModel,
    _extract_context_filter,
    _parse_active_context,
    _parse_context_names,
    _parse_task,
    _parse_tasks,
)

CONTEXT_LIST_V25 = """
Name Definition                Active
---- ------------------------- ------
home project:home              no
work project:work or +urgent   yes

Use 'task context none' to unset the current context.
"""

CONTEXT_LIST_V26 = """
Name Type  Definition       Active
---- ----- ---------------- ------
home read  project:home     no
     write project:home
work read  project:work     yes
     write project:work
"""

CONTEXT_LIST_INACTIVE = """
Name Type  Definition       Active
---- ----- ---------------- ------
home read  project:home     no
     write project:home
"""

SHOW_OUTPUT = """\
color=on
context.home.read=project:home
context.home.write=project:home
context.work.read=project:work and ( +urgent or description:"a=b" )
context.work.write=project:work
context=work
"""


class TestParseActiveContext:
    """Tests for reading the Active column of `task context list`."""

    def test_legacy_layout(self):
        assert _parse_active_context(CONTEXT_LIST_V25) == "work"

    def test_read_write_layout(self):
        assert _parse_active_context(CONTEXT_LIST_V26) == "work"

    def test_no_active_context(self):
        assert _parse_active_context(CONTEXT_LIST_INACTIVE) is None

    def test_no_contexts_defined(self):
        assert _parse_active_context("No contexts defined.") is None
        assert _parse_active_context("") is None

    def test_continuation_rows_are_ignored(self):
        """An indented row ending in 'yes' is not a context row."""
        output = "Name Type Definition Active\nhome read project:home no\n     write yes\n"
        assert _parse_active_context(output) is None


class TestParseContextNames:
    """Tests for the context name list."""

    def test_none_comes_first(self):
        assert _parse_context_names("home\nwork\n") == [NONE_CONTEXT, "home", "work"]

    def test_none_listed_once(self):
        """A literal 'none' reported by the tool is not duplicated."""
        names = _parse_context_names("none\nhome\nnone\nwork\n")
        assert names.count(NONE_CONTEXT) == 1
        assert names == [NONE_CONTEXT, "home", "work"]

    def test_blank_and_duplicate_lines(self):
        assert _parse_context_names("\n  home  \nhome\n\n") == [NONE_CONTEXT, "home"]

    def test_empty_output(self):
        assert _parse_context_names("") == [NONE_CONTEXT]


class TestExtractContextFilter:
    """Tests for finding a context's read filter in `task _show` output."""

    def test_read_filter(self):
        assert _extract_context_filter(SHOW_OUTPUT, "home") == "project:home"

    def test_everything_after_first_equals_is_kept(self):
        """Quotes and further '=' signs are preserved verbatim."""
        assert _extract_context_filter(SHOW_OUTPUT, "work") == 'project:work and ( +urgent or description:"a=b" )'

    def test_legacy_key(self):
        output = "context.work=project:work\ncontext=work\n"
        assert _extract_context_filter(output, "work") == "project:work"

    def test_read_key_wins_over_legacy_key(self):
        output = "context.work=project:old\ncontext.work.read=project:new\n"
        assert _extract_context_filter(output, "work") == "project:new"

    def test_missing_context(self):
        assert _extract_context_filter(SHOW_OUTPUT, "errands") is None

    def test_empty_value_counts_as_missing(self):
        assert _extract_context_filter("context.work.read=\n", "work") is None

    def test_surrounding_whitespace_is_kept(self):
        assert _extract_context_filter("context.work.read= project:work \n", "work") == " project:work "

    def test_prefix_of_other_context_does_not_match(self):
        """'work' must not pick up 'workshop'."""
        output = "context.workshop.read=project:shop\n"
        assert _extract_context_filter(output, "work") is None


class TestParseTasks:
    """Tests for task parsing."""

    def test_parse_task_keeps_unknown_attributes(self):
        task = _parse_task({"uuid": "abc", "description": "x", "estimate": "2h"})
        assert isinstance(task, TaskModel)
        assert task.model_dump()["estimate"] == "2h"

    def test_parse_tasks(self, sample_tasks):
        tasks = _parse_tasks(sample_tasks)
        assert [t.id for t in tasks] == [1, 2, 3]
        assert tasks[0].tags == ["urgent"]

    def test_depends_accepts_list_and_string(self):
        assert _parse_task({"depends": ["a", "b"]}).depends == ["a", "b"]
        assert _parse_task({"depends": "a,b"}).depends == "a,b"

    def test_to_import_sends_only_given_fields(self):
        task = TaskModel.model_validate({"uuid": "abc", "project": "work", "estimate": "2h"})
        assert task.to_import() == {"uuid": "abc", "project": "work", "estimate": "2h"}
