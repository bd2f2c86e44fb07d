"""Utility functions for Taskwarrior Web."""

from taskwarrior_web.utils.cli import _get_tasks_json, _run_task_command
from taskwarrior_web.utils.formatters import (
    _format_contexts_markdown,
    _format_task_markdown,
    _format_tasks_markdown,
)
from taskwarrior_web.utils.parsers import (
    _extract_context_filter,
    _parse_active_context,
    _parse_context_names,
    _parse_task,
    _parse_tasks,
)

__all__ = [
    "_run_task_command",
    "_get_tasks_json",
    "_parse_task",
    "_parse_tasks",
    "_parse_active_context",
    "_parse_context_names",
    "_extract_context_filter",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_contexts_markdown",
]
