"""
Client-side state store for the Taskwarrior Web API.

Holds what a front end displays (tasks, contexts, settings, notifications)
and keeps it in step with the server. Context state only ever flows from
server to client: whatever context a response reports replaces the one held
here, and the client changes the server's context only through
`set_context`.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from taskwarrior_web.client.settings import ClientSettings, SettingsStorage
from taskwarrior_web.models.context import NONE_CONTEXT

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
HIDDEN_COLUMNS_KEY = "hiddenColumns"


class Notification(BaseModel):
    color: str = ""
    text: str = ""


class ContextState(BaseModel):
    available: list[str] = Field(default_factory=list)
    active: str = NONE_CONTEXT


class TaskStore:
    def __init__(self, http: httpx.Client, storage: SettingsStorage, api_prefix: str = "") -> None:
        self.http = http
        self.storage = storage
        self.api_prefix = api_prefix.rstrip("/")

        self.tasks: list[dict[str, Any]] = []
        self.snackbar = False
        self.notification = Notification()
        self.settings = ClientSettings()
        self.contexts = ContextState()
        self.hidden_columns: list[str] = []

    # -- getters ----------------------------------------------------------

    @property
    def projects(self) -> list[str]:
        return [t["project"] for t in self.tasks if t.get("project") is not None]

    @property
    def tags(self) -> list[str]:
        tags: list[str] = []
        for task in self.tasks:
            tags.extend(task.get("tags") or [])
        return tags

    # -- mutations --------------------------------------------------------

    def set_settings(self, settings: ClientSettings) -> None:
        self.settings = settings

    def set_tasks(self, tasks: list[dict[str, Any]]) -> None:
        self.tasks = tasks

    def set_hidden_columns(self, hidden_columns: list[str]) -> None:
        self.hidden_columns = hidden_columns

    def set_contexts(self, contexts: ContextState) -> None:
        self.contexts = contexts

    def set_active_context(self, context: str) -> None:
        self.contexts.active = context

    def set_notification(self, color: str, text: str) -> None:
        self.notification = Notification(color=color, text=text)
        self.snackbar = True

    def set_snackbar(self, value: bool) -> None:
        self.snackbar = value

    # -- actions ----------------------------------------------------------

    def fetch_settings(self) -> None:
        raw = self.storage.get_item(SETTINGS_KEY)
        if raw:
            self.set_settings(ClientSettings.from_stored(json.loads(raw)))

    def update_settings(self, settings: ClientSettings) -> None:
        settings = settings.with_theme_synced()
        self.set_settings(settings)
        self.storage.set_item(SETTINGS_KEY, json.dumps(settings.to_stored()))

    def fetch_hidden_columns(self) -> None:
        raw = self.storage.get_item(HIDDEN_COLUMNS_KEY)
        if raw:
            self.set_hidden_columns(json.loads(raw))

    def update_hidden_columns(self, columns: list[str]) -> None:
        self.set_hidden_columns(columns)
        self.storage.set_item(HIDDEN_COLUMNS_KEY, json.dumps(columns))

    def fetch_contexts(self) -> None:
        try:
            response = self.http.get(self._url("/tasks/contexts"))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error fetching contexts: %s", e)
            self.set_notification("error", "Failed to load Taskwarrior contexts")
            return
        data = response.json()
        self.set_contexts(ContextState(available=data["contexts"], active=data["active"]))
        self._adopt_context(data["active"])

    def set_context(self, name: str) -> None:
        try:
            response = self.http.post(self._url(f"/tasks/context/{quote(name, safe='')}"))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Error setting context %r: %s", name, e)
            self.set_notification("error", "Failed to set Taskwarrior context")
            return

        data = response.json()
        active = data.get("context") or NONE_CONTEXT
        self._adopt_context(active)
        try:
            if data.get("tasks") is not None:
                self.set_tasks(data["tasks"])
            else:
                self.fetch_tasks()
        except httpx.HTTPError as e:
            logger.error("Context is %r but its tasks could not be loaded: %s", active, e)
            self.set_notification("error", "Failed to load tasks")
            return

        text = "Context cleared" if active == NONE_CONTEXT else f"Context set to: {active}"
        self.set_notification("success", text)

    def fetch_tasks(self) -> None:
        """Reload tasks; raises httpx.HTTPStatusError when the server fails."""
        response = self.http.get(self._url("/tasks"))
        response.raise_for_status()
        data = response.json()
        self.set_tasks(data["tasks"])
        if data.get("context"):
            self._adopt_context(data["context"])

    def delete_tasks(self, tasks: list[dict[str, Any]]) -> None:
        uuids = [t["uuid"] for t in tasks if t.get("uuid")]
        response = self.http.delete(self._url("/tasks"), params={"tasks": uuids})
        response.raise_for_status()
        self.fetch_tasks()

    def update_tasks(self, tasks: list[dict[str, Any]]) -> None:
        response = self.http.put(self._url("/tasks"), json={"tasks": tasks})
        response.raise_for_status()
        self.fetch_tasks()

    def sync_tasks(self) -> None:
        response = self.http.post(self._url("/sync"))
        response.raise_for_status()

    def _adopt_context(self, context: str) -> None:
        """Take the server's context as the truth and persist it."""
        if context == self.contexts.active and context == self.settings.context:
            return
        self.set_active_context(context)
        self.update_settings(self.settings.model_copy(update={"context": context}))

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}{path}"
