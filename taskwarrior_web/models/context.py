"""Context models for Taskwarrior Web."""

from __future__ import annotations

from pydantic import BaseModel

# Pseudo-context meaning "no filter"; `task context none` clears the active one.
NONE_CONTEXT = "none"


class ActiveContext(BaseModel):
    """The context Taskwarrior currently applies, and the read filter it implies."""

    name: str = NONE_CONTEXT
    filter_expression: str | None = None

    @property
    def is_active(self) -> bool:
        return self.name != NONE_CONTEXT
