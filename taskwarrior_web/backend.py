"""Access to Taskwarrior through a narrow, fakeable interface."""

from __future__ import annotations

import json
from typing import Any, Protocol

from taskwarrior_web.context import ContextResolver
from taskwarrior_web.errors import TaskwarriorError
from taskwarrior_web.models.context import ActiveContext
from taskwarrior_web.utils.cli import _get_tasks_json, _run_task_command


class TaskBackend(Protocol):
    """Everything the gateway needs from Taskwarrior.

    Read methods about contexts never raise. Everything else raises
    TaskwarriorError when the tool fails.
    """

    def get_active_context(self) -> ActiveContext: ...

    def list_contexts(self) -> list[str]: ...

    def set_context(self, name: str) -> str: ...

    def export_tasks(self, filter_expr: str | None = None) -> list[dict[str, Any]]: ...

    def update(self, tasks: list[dict[str, Any]]) -> str: ...

    def delete(self, uuids: list[str]) -> str: ...

    def sync(self) -> str: ...


class TaskwarriorBackend:
    """TaskBackend backed by the `task` CLI."""

    def __init__(self, resolver: ContextResolver | None = None) -> None:
        self.resolver = resolver or ContextResolver()

    def get_active_context(self) -> ActiveContext:
        return self.resolver.resolve_active_context()

    def list_contexts(self) -> list[str]:
        return self.resolver.available_contexts()

    def set_context(self, name: str) -> str:
        """Activate ``name``; "none" clears the active context."""
        return self._run(["context", name, "rc.confirmation=off"])

    def export_tasks(self, filter_expr: str | None = None) -> list[dict[str, Any]]:
        success, result = _get_tasks_json(filter_expr)
        if not success:
            args = [filter_expr, "export"] if filter_expr else ["export"]
            raise TaskwarriorError(str(result), command=args)
        return result if isinstance(result, list) else []

    def update(self, tasks: list[dict[str, Any]]) -> str:
        """Create or modify tasks with `task import` (matched on uuid)."""
        return self._run(["import", "-", "rc.confirmation=off"], input_text=json.dumps(tasks))

    def delete(self, uuids: list[str]) -> str:
        """Delete every task whose uuid is listed."""
        terms: list[str] = []
        for uuid in uuids:
            if terms:
                terms.append("or")
            terms.append(f"uuid:{uuid}")
        return self._run(["(", *terms, ")", "delete", "rc.confirmation=off", "rc.bulk=0"])

    def sync(self) -> str:
        return self._run(["sync"])

    def _run(self, args: list[str], input_text: str | None = None) -> str:
        success, output = _run_task_command(args, input_text=input_text)
        if not success:
            raise TaskwarriorError(output, command=args)
        return output
