"""Request and response payloads shared by the HTTP API and the MCP tools."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from taskwarrior_web.models.context import NONE_CONTEXT
from taskwarrior_web.models.task import TaskModel


class TaskUpdateRequest(BaseModel):
    """Body of PUT/POST /tasks."""

    tasks: list[TaskModel] = Field(default_factory=list)


class TaskListResult(BaseModel):
    """Tasks exported under the active context."""

    tasks: list[dict[str, Any]] = Field(default_factory=list)
    context: str = NONE_CONTEXT


class ContextListResult(BaseModel):
    contexts: list[str] = Field(default_factory=lambda: [NONE_CONTEXT])
    active: str = NONE_CONTEXT


class ContextSwitchResult(BaseModel):
    """Outcome of a context switch.

    ``tasks`` is None when the switch succeeded but the follow-up export did
    not.
    """

    success: bool
    context: str
    tasks: list[dict[str, Any]] | None = None


class CommandResult(BaseModel):
    """Result of a mutating Taskwarrior call (import, delete, sync)."""

    success: bool
    message: str = ""
