"""Error types raised when the Taskwarrior CLI cannot serve a request."""

from __future__ import annotations


class TaskwarriorError(RuntimeError):
    """Raised when a `task` invocation fails or returns unusable output.

    The message is the human-readable error produced by the CLI helper
    (it always starts with ``"Error:"``).
    """

    def __init__(self, message: str, *, command: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.command = list(command or [])
