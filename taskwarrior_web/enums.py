"""Enums for Taskwarrior Web."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for MCP tool responses."""

    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Same payload the HTTP API returns


class Theme(str, Enum):
    """Colour scheme stored in client settings."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
