"""Parser helpers for Taskwarrior data and CLI output."""

from typing import Any

from taskwarrior_web.models.context import NONE_CONTEXT
from taskwarrior_web.models.task import TaskModel

# Value of the "Active" column in `task context list`.
_ACTIVE_MARKER = "yes"


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Dictionary from Taskwarrior JSON export

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of task dictionaries into TaskModel instances.

    Args:
        tasks: List of dictionaries from Taskwarrior JSON export

    Returns:
        List of TaskModel instances
    """
    return [TaskModel.model_validate(t) for t in tasks]


def _parse_active_context(output: str) -> str | None:
    """
    Find the active context in `task context list` output.

    Handles both table layouts::

        Name Definition   Active          (2.5)
        work project:work yes

        Name Type  Definition   Active    (2.6+)
        work read  project:work yes
             write project:work

    Continuation rows (indented) and the header are never matched.

    Args:
        output: stdout of `task context list`

    Returns:
        Name of the active context, or None when no row is marked active
    """
    for line in output.splitlines():
        if not line.strip() or line[0].isspace():
            continue
        tokens = line.split()
        if len(tokens) >= 2 and tokens[-1].lower() == _ACTIVE_MARKER:
            return tokens[0]
    return None


def _parse_context_names(output: str) -> list[str]:
    """
    Build the list of selectable contexts from `task _context` output.

    The pseudo-context "none" always comes first and appears exactly once.

    Args:
        output: stdout of `task _context` (one name per line)

    Returns:
        ["none", <configured names in order, de-duplicated>]
    """
    names = [NONE_CONTEXT]
    for line in output.splitlines():
        name = line.strip()
        if name and name not in names:
            names.append(name)
    return names


def _extract_context_filter(show_output: str, name: str) -> str | None:
    """
    Read a context's filter from `task _show` output (``key=value`` lines).

    ``context.<name>.read`` is preferred; ``context.<name>`` is the key used by
    Taskwarrior before read/write contexts existed. Everything after the first
    ``=`` is returned untouched, quotes included.

    Args:
        show_output: stdout of `task _show`
        name: Context name

    Returns:
        The filter expression, or None when neither key has a value
    """
    values: dict[str, str] = {}
    for line in show_output.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            values.setdefault(key.strip(), value)

    for key in (f"context.{name}.read", f"context.{name}"):
        value = values.get(key)
        if value is not None and value.strip():
            return value
    return None
