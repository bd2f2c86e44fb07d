import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from taskwarrior_web.config import Settings, get_settings
from taskwarrior_web.logging_setup import setup_logging


def test_defaults():
    settings = Settings()

    assert settings.task_binary == "task"
    assert settings.command_timeout == 30
    assert settings.api_prefix == ""
    assert settings.task_environment() is None


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TASKWARRIOR_WEB_TASKRC", str(tmp_path / ".taskrc"))
    monkeypatch.setenv("TASKWARRIOR_WEB_PORT", "9001")
    monkeypatch.setenv("TASKWARRIOR_WEB_CORS_ORIGINS", '["http://localhost:3000"]')

    settings = get_settings()

    assert settings.taskrc == tmp_path / ".taskrc"
    assert settings.port == 9001
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.task_environment()["TASKRC"] == str(tmp_path / ".taskrc")


def test_reads_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("TASKWARRIOR_WEB_TASK_BINARY=/usr/local/bin/task\n", encoding="utf-8")

    assert Settings().task_binary == "/usr/local/bin/task"


def test_environment_beats_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("TASKWARRIOR_WEB_TASK_BINARY=/from/dotenv\n", encoding="utf-8")
    monkeypatch.setenv("TASKWARRIOR_WEB_TASK_BINARY", "/from/env")

    assert Settings().task_binary == "/from/env"


@pytest.mark.parametrize("raw, expected", [("api", "/api"), ("/api/", "/api"), ("  ", ""), ("/v1/tw", "/v1/tw")])
def test_api_prefix_normalized(raw, expected):
    assert Settings(api_prefix=raw).api_prefix == expected


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        Settings(command_timeout=0)


def test_taskdata_is_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    env = Settings(taskdata=Path("~/tasks")).task_environment()
    assert env["TASKDATA"] == str(tmp_path / "tasks")


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
