"""Pydantic models for Taskwarrior Web."""

from taskwarrior_web.models.api import (
    CommandResult,
    ContextListResult,
    ContextSwitchResult,
    TaskListResult,
    TaskUpdateRequest,
)
from taskwarrior_web.models.context import NONE_CONTEXT, ActiveContext
from taskwarrior_web.models.inputs import (
    DeleteTasksInput,
    ListContextsInput,
    ListTasksInput,
    SetContextInput,
    UpdateTasksInput,
)
from taskwarrior_web.models.task import TaskAnnotation, TaskModel

__all__ = [
    # Task models
    "TaskAnnotation",
    "TaskModel",
    # Context models
    "NONE_CONTEXT",
    "ActiveContext",
    # API payloads
    "TaskUpdateRequest",
    "TaskListResult",
    "ContextListResult",
    "ContextSwitchResult",
    "CommandResult",
    # MCP tool inputs
    "ListTasksInput",
    "UpdateTasksInput",
    "DeleteTasksInput",
    "ListContextsInput",
    "SetContextInput",
]
