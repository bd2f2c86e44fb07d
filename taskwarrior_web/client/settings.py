"""Locally persisted client settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from taskwarrior_web.enums import Theme
from taskwarrior_web.models.context import NONE_CONTEXT

logger = logging.getLogger(__name__)


class ClientSettings(BaseModel):
    """User preferences kept on the client.

    Stored with the camelCase keys the web front end has always used, so a
    settings file can be shared with it.
    """

    model_config = ConfigDict(populate_by_name=True)

    theme: Theme = Theme.SYSTEM
    dark: bool = False  # legacy flag, mirrors theme == dark
    auto_refresh: str = Field(default="5", alias="autoRefresh")  # minutes
    auto_sync: str = Field(default="0", alias="autoSync")  # minutes, "0" disables
    context: str = NONE_CONTEXT  # last context the server reported

    @classmethod
    def from_stored(cls, data: dict[str, Any]) -> ClientSettings:
        """Load settings written by any earlier version of the client."""
        data = dict(data)
        if data.get("dark") is not None and data.get("theme") is None:
            data["theme"] = Theme.DARK if data["dark"] else Theme.LIGHT
        if data.get("context") is None:
            data["context"] = NONE_CONTEXT
        return cls.model_validate(data)

    def to_stored(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def with_theme_synced(self) -> ClientSettings:
        """Copy whose legacy ``dark`` flag agrees with ``theme``."""
        return self.model_copy(update={"dark": self.theme == Theme.DARK})


class SettingsStorage:
    """String key/value storage in a JSON file, like a browser's localStorage."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2), encoding="utf-8")

    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            items = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        return items if isinstance(items, dict) else {}
