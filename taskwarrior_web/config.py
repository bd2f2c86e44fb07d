"""
Taskwarrior Web configuration settings.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TASKWARRIOR_WEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Taskwarrior CLI
    task_binary: str = Field(default="task", description="Name or path of the Taskwarrior executable")
    taskrc: Path | None = Field(default=None, description="Exported as TASKRC to every invocation")
    taskdata: Path | None = Field(default=None, description="Exported as TASKDATA to every invocation")
    command_timeout: float = Field(default=30, gt=0, description="Seconds before a `task` call is abandoned")

    # HTTP server
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    api_prefix: str = Field(default="", description="Path prefix for the task routes, e.g. '/api'")
    cors_origins: list[str] = Field(default_factory=list)

    log_level: str = "INFO"

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    def task_environment(self) -> dict[str, str] | None:
        """Environment for `task` subprocesses, or None to inherit ours unchanged."""
        if self.taskrc is None and self.taskdata is None:
            return None
        env = dict(os.environ)
        if self.taskrc is not None:
            env["TASKRC"] = str(self.taskrc.expanduser())
        if self.taskdata is not None:
            env["TASKDATA"] = str(self.taskdata.expanduser())
        return env


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
