"""Pytest configuration and fixtures for taskwarrior-web tests."""

import json
import subprocess
from unittest.mock import patch

import pytest

from taskwarrior_web.config import get_settings
from taskwarrior_web.gateway import get_gateway

from .fakes import completed


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start every test from default settings, whatever the host environment says."""
    for key in ("TASK_BINARY", "TASKRC", "TASKDATA", "COMMAND_TIMEOUT", "API_PREFIX", "LOG_LEVEL"):
        monkeypatch.delenv(f"TASKWARRIOR_WEB_{key}", raising=False)
    get_settings.cache_clear()
    get_gateway.cache_clear()
    yield
    get_settings.cache_clear()
    get_gateway.cache_clear()


@pytest.fixture
def sample_tasks():
    """Tasks as `task export` prints them."""
    return [
        {
            "id": 1,
            "uuid": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
            "description": "Task one",
            "status": "pending",
            "urgency": 8.0,
            "project": "work",
            "priority": "H",
            "tags": ["urgent"],
        },
        {
            "id": 2,
            "uuid": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
            "description": "Task two",
            "status": "pending",
            "urgency": 3.0,
            "project": "home",
        },
        {
            "id": 3,
            "uuid": "c3d4e5f6-a7b8-9012-cdef-123456789012",
            "description": "Task three",
            "status": "pending",
            "urgency": 5.0,
            "project": "work",
            "tags": ["review"],
        },
    ]


@pytest.fixture
def mock_subprocess_success():
    """Mock subprocess.run to return successful task output."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = completed()
        yield mock_run


@pytest.fixture
def mock_subprocess_with_tasks(sample_tasks):
    """Mock subprocess.run to return a list of tasks."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = completed(stdout=json.dumps(sample_tasks))
        yield mock_run


@pytest.fixture
def mock_subprocess_error():
    """Mock subprocess.run to simulate a Taskwarrior error."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = completed(returncode=1, stderr="Task not found.")
        yield mock_run


@pytest.fixture
def mock_subprocess_timeout():
    """Mock subprocess.run to simulate a timeout."""
    with patch("subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="task", timeout=30)
        yield mock_run
