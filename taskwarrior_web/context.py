"""Resolution of the active Taskwarrior context.

Taskwarrior's own configuration is the only source of truth: nothing here is
cached, every call asks the CLI again. Failures never propagate; a resolver
that cannot talk to Taskwarrior reports the "none" context so callers behave
as if no context were set.
"""

from __future__ import annotations

import logging

from taskwarrior_web.models.context import NONE_CONTEXT, ActiveContext
from taskwarrior_web.utils.cli import _run_task_command
from taskwarrior_web.utils.parsers import (
    _extract_context_filter,
    _parse_active_context,
    _parse_context_names,
)

logger = logging.getLogger(__name__)


class ContextResolver:
    """Turns `task context list` / `task _show` output into structured results."""

    def resolve_active_context(self) -> ActiveContext:
        """Return the active context and, when discoverable, its read filter."""
        success, output = _run_task_command(["context", "list"])
        if not success:
            if "No contexts defined" in output:
                logger.debug("No contexts defined")
                return ActiveContext()
            logger.warning("Could not list contexts, assuming none: %s", output)
            return ActiveContext()

        name = _parse_active_context(output)
        if name is None or name == NONE_CONTEXT:
            return ActiveContext()

        filter_expression = self.context_filter(name)
        if filter_expression is None:
            logger.info("No read filter found for context %r; relying on Taskwarrior to apply it", name)
        return ActiveContext(name=name, filter_expression=filter_expression)

    def context_filter(self, name: str) -> str | None:
        """Look up the configured read filter of ``name``."""
        success, output = _run_task_command(["_show"])
        if not success:
            logger.warning("Could not read configuration for context %r: %s", name, output)
            return None
        return _extract_context_filter(output, name)

    def available_contexts(self) -> list[str]:
        """All configured context names, with "none" first."""
        success, output = _run_task_command(["_context"])
        if not success:
            logger.warning("Could not list context names: %s", output)
            return [NONE_CONTEXT]
        return _parse_context_names(output)
