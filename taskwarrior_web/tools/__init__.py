"""MCP tool definitions for Taskwarrior Web."""

# Import all tools to register them with the MCP server
from taskwarrior_web.tools.core import (
    taskwarrior_contexts,
    taskwarrior_delete,
    taskwarrior_list,
    taskwarrior_set_context,
    taskwarrior_update,
)

__all__ = [
    "taskwarrior_list",
    "taskwarrior_update",
    "taskwarrior_delete",
    "taskwarrior_contexts",
    "taskwarrior_set_context",
]
