"""Shared test fixtures."""

import copy
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from task_relay.app import app
from task_relay.models.tasks import CommandTable
from task_relay.slack.dependencies import get_command_table, get_responder

SAMPLE_CONFIG = {
    "slack_token": "xoxb-test",
    "tasks": {
        "restart-api": {
            "command": "Restart API",
            "url": "http://x/restart",
            "method": "POST",
            "user": "u",
            "token": "t",
        },
        "status": {
            "command": "Status",
            "url": "http://x/status",
            "method": "GET",
        },
    },
    "jenkins": {
        "user": "jenkins",
        "token": "secret",
        "url_format": "https://ci.example.com/job/{service-name}/{env}/build",
    },
}


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app (lifespan not run)."""
    return TestClient(app)


@pytest.fixture
def sample_config() -> dict:
    """Raw config document as it would appear in config.json."""
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def command_table(sample_config: dict) -> CommandTable:
    """A command table with one POST task, one GET task, and a deploy template."""
    return CommandTable.model_validate(sample_config)


@pytest.fixture
def responder() -> AsyncMock:
    """A Responder double recording post_message calls."""
    return AsyncMock()


@pytest.fixture
def relay_client(command_table: CommandTable, responder: AsyncMock):
    """TestClient with the command table and responder injected via dependency overrides."""
    app.dependency_overrides[get_command_table] = lambda: command_table
    app.dependency_overrides[get_responder] = lambda: responder
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
