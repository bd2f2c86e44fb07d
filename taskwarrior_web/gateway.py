"""Task gateway: the operations behind the HTTP API and the MCP tools.

Each call is independent. The active context is re-read from Taskwarrior
every time, so a context changed from the command line is picked up on the
next request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from taskwarrior_web.backend import TaskBackend, TaskwarriorBackend
from taskwarrior_web.errors import TaskwarriorError
from taskwarrior_web.models.api import (
    CommandResult,
    ContextListResult,
    ContextSwitchResult,
    TaskListResult,
)
from taskwarrior_web.models.context import ActiveContext
from taskwarrior_web.models.task import TaskModel

logger = logging.getLogger(__name__)


class TaskGateway:
    def __init__(self, backend: TaskBackend) -> None:
        self.backend = backend

    def list_tasks(self) -> TaskListResult:
        """
        Export tasks under the active context.

        Raises:
            TaskwarriorError: if the export (or the fallback context switch) fails
        """
        active = self.backend.get_active_context()
        tasks = self._export_for(active)
        return TaskListResult(tasks=tasks, context=active.name)

    def update_tasks(self, tasks: Iterable[TaskModel | dict[str, Any]]) -> CommandResult:
        """
        Create or update tasks.

        The outcome of the import is returned as-is; callers decide what a
        failed import means for them.
        """
        payload = [t.to_import() if isinstance(t, TaskModel) else dict(t) for t in tasks]
        if not payload:
            return CommandResult(success=True, message="No tasks to update")

        try:
            message = self.backend.update(payload)
        except TaskwarriorError as e:
            logger.error("Updating %d task(s) failed: %s", len(payload), e.message)
            return CommandResult(success=False, message=e.message)

        logger.info("Updated %d task(s): %s", len(payload), message)
        return CommandResult(success=True, message=message)

    def delete_tasks(self, uuids: Iterable[str]) -> CommandResult:
        """Delete tasks by uuid; an empty selection does nothing."""
        selected: list[str] = []
        for uuid in uuids:
            uuid = uuid.strip()
            if uuid and uuid not in selected:
                selected.append(uuid)
        if not selected:
            return CommandResult(success=True, message="No tasks to delete")

        try:
            message = self.backend.delete(selected)
        except TaskwarriorError as e:
            logger.error("Deleting %s failed: %s", selected, e.message)
            return CommandResult(success=False, message=e.message)

        logger.info("Deleted %d task(s): %s", len(selected), message)
        return CommandResult(success=True, message=message)

    def list_contexts(self) -> ContextListResult:
        return ContextListResult(
            contexts=self.backend.list_contexts(),
            active=self.backend.get_active_context().name,
        )

    def set_context(self, name: str) -> ContextSwitchResult:
        """
        Switch Taskwarrior to ``name`` ("none" clears it) and export under it.

        The name is not checked against the configured contexts; Taskwarrior
        rejects unknown ones.

        Raises:
            TaskwarriorError: if Taskwarrior refuses the switch
        """
        output = self.backend.set_context(name)
        logger.info("Context set to %r: %s", name, output)

        active = self.backend.get_active_context()
        try:
            tasks = self._export_for(active)
        except TaskwarriorError as e:
            logger.error("Context switched to %r but export failed: %s", active.name, e.message)
            return ContextSwitchResult(success=True, context=active.name, tasks=None)
        return ContextSwitchResult(success=True, context=active.name, tasks=tasks)

    def sync(self) -> CommandResult:
        try:
            message = self.backend.sync()
        except TaskwarriorError as e:
            logger.error("Sync failed: %s", e.message)
            return CommandResult(success=False, message=e.message)
        return CommandResult(success=True, message=message)

    def _export_for(self, active: ActiveContext) -> list[dict[str, Any]]:
        if active.filter_expression:
            return self.backend.export_tasks(active.filter_expression)
        if active.is_active:
            # Filter unknown: make sure Taskwarrior itself applies the context.
            self.backend.set_context(active.name)
        return self.backend.export_tasks()


@lru_cache
def get_gateway() -> TaskGateway:
    """Gateway over the real `task` CLI, shared by the MCP tools."""
    return TaskGateway(TaskwarriorBackend())
