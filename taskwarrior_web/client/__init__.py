"""Python client state store for the Taskwarrior Web API."""

from taskwarrior_web.client.settings import ClientSettings, SettingsStorage
from taskwarrior_web.client.store import ContextState, Notification, TaskStore

__all__ = [
    "ClientSettings",
    "SettingsStorage",
    "TaskStore",
    "ContextState",
    "Notification",
]
