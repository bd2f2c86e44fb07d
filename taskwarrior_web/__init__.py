"""
Taskwarrior Web.

HTTP API and MCP server over the Taskwarrior CLI: list, create, update and
delete tasks, and switch Taskwarrior contexts, with listings always filtered
by whichever context Taskwarrior currently has active.
"""

# Re-export enums
from taskwarrior_web.enums import ResponseFormat, Theme

# Re-export errors
from taskwarrior_web.errors import TaskwarriorError

# Re-export models
from taskwarrior_web.models import (
    NONE_CONTEXT,
    ActiveContext,
    CommandResult,
    ContextListResult,
    ContextSwitchResult,
    DeleteTasksInput,
    ListContextsInput,
    ListTasksInput,
    SetContextInput,
    TaskAnnotation,
    TaskListResult,
    TaskModel,
    TaskUpdateRequest,
    UpdateTasksInput,
)

# Re-export the context resolver, backend and gateway
from taskwarrior_web.context import ContextResolver
from taskwarrior_web.backend import TaskBackend, TaskwarriorBackend
from taskwarrior_web.gateway import TaskGateway, get_gateway

# Re-export utilities (including private functions used by tests)
from taskwarrior_web.utils import (
    _extract_context_filter,
    _format_contexts_markdown,
    _format_task_markdown,
    _format_tasks_markdown,
    _get_tasks_json,
    _parse_active_context,
    _parse_context_names,
    _parse_task,
    _parse_tasks,
    _run_task_command,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "Theme",
    # Errors
    "TaskwarriorError",
    # Models
    "NONE_CONTEXT",
    "ActiveContext",
    "TaskAnnotation",
    "TaskModel",
    "TaskUpdateRequest",
    "TaskListResult",
    "ContextListResult",
    "ContextSwitchResult",
    "CommandResult",
    "ListTasksInput",
    "UpdateTasksInput",
    "DeleteTasksInput",
    "ListContextsInput",
    "SetContextInput",
    # Context resolution and gateway
    "ContextResolver",
    "TaskBackend",
    "TaskwarriorBackend",
    "TaskGateway",
    "get_gateway",
    # Utility functions
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
