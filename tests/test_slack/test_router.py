"""Integration tests for the /slack/events endpoint."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest
from fastapi.testclient import TestClient

from task_relay.app import app
from task_relay.config import Settings, get_settings
from task_relay.slack.dependencies import get_responder
from task_relay.slack.notifier import SlackResponder

CHANNEL = "C0AFQJHAVS6"
_HANDLERS = "task_relay.slack.handlers"


def _message_payload(text: str, **event_overrides: object) -> dict:
    event = {
        "type": "message",
        "user": "U123",
        "channel": CHANNEL,
        "ts": "1234567890.123456",
        "text": text,
    }
    event.update(event_overrides)
    return {"type": "event_callback", "event": event}


def test_url_verification_challenge(relay_client: TestClient):
    """Verification handshake echoes the challenge as JSON."""
    response = relay_client.post(
        "/slack/events", json={"type": "url_verification", "challenge": "abc123"}
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"challenge": "abc123"}


def test_url_verification_bad_challenge_returns_400(relay_client: TestClient):
    response = relay_client.post(
        "/slack/events", json={"type": "url_verification", "challenge": 123}
    )
    assert response.status_code == 400


@pytest.mark.parametrize("body", [b"{not json", b"", b"\xff\xfe"])
def test_malformed_body_returns_400(body: bytes, relay_client: TestClient, responder: AsyncMock):
    response = relay_client.post(
        "/slack/events", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    responder.post_message.assert_not_called()


@pytest.mark.parametrize("body", [[1, 2], "text", 7, None])
def test_non_object_json_returns_400(body: object, relay_client: TestClient):
    response = relay_client.post(
        "/slack/events", content=json.dumps(body), headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_list_command_replies(relay_client: TestClient, responder: AsyncMock):
    response = relay_client.post("/slack/events", json=_message_payload("List"))

    assert response.status_code == 200
    assert response.content == b""
    responder.post_message.assert_awaited_once_with(
        CHANNEL, "Here are the available commands:\n- restart-api\n- status\n"
    )


def test_static_task_posts_with_basic_auth(relay_client: TestClient, responder: AsyncMock):
    """A configured POST task is called with its credentials and the result is reported."""
    http_client = AsyncMock()
    http_response = MagicMock()
    http_response.status_code = 200
    http_client.request.return_value = http_response
    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=http_client)
    ctx.__aexit__ = AsyncMock(return_value=False)

    with patch("task_relay.tasks.executor.httpx.AsyncClient", return_value=ctx):
        response = relay_client.post("/slack/events", json=_message_payload("restart-api"))

    assert response.status_code == 200
    http_client.request.assert_called_once_with(
        "POST", "http://x/restart", headers={"Authorization": "Basic dTp0"}
    )
    responder.post_message.assert_awaited_once_with(
        CHANNEL, "Task 'Restart API' executed successfully."
    )


def test_deploy_uses_configured_timeout(relay_client: TestClient, responder: AsyncMock):
    """The outbound timeout comes from settings."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, outbound_timeout_seconds=2.5
    )
    with patch(f"{_HANDLERS}.execute_deployment", new_callable=AsyncMock) as mock_deploy:
        mock_deploy.return_value = True
        response = relay_client.post(
            "/slack/events", json=_message_payload("deploy payments prod")
        )

    assert response.status_code == 200
    mock_deploy.assert_awaited_once_with(
        "https://ci.example.com/job/payments/prod/build", "jenkins", "secret", timeout=2.5
    )


def test_unknown_command_reply(relay_client: TestClient, responder: AsyncMock):
    response = relay_client.post("/slack/events", json=_message_payload("make coffee"))

    assert response.status_code == 200
    responder.post_message.assert_awaited_once_with(
        CHANNEL, "I don't know your message. Please try again."
    )


@pytest.mark.parametrize("overrides", [{"bot_id": "B123"}, {"subtype": "message_changed"}])
def test_bot_and_subtype_messages_ignored(
    overrides: dict, relay_client: TestClient, responder: AsyncMock
):
    with patch(f"{_HANDLERS}.execute_task", new_callable=AsyncMock) as mock_execute:
        response = relay_client.post(
            "/slack/events", json=_message_payload("restart-api", **overrides)
        )

    assert response.status_code == 200
    mock_execute.assert_not_called()
    responder.post_message.assert_not_called()


def test_missing_event_returns_empty_200(relay_client: TestClient, responder: AsyncMock):
    response = relay_client.post("/slack/events", json={"type": "event_callback"})

    assert response.status_code == 200
    assert response.content == b""
    responder.post_message.assert_not_called()


def test_malformed_event_returns_200(relay_client: TestClient, responder: AsyncMock):
    response = relay_client.post(
        "/slack/events",
        json={"type": "event_callback", "event": {"type": "message", "text": ["list"]}},
    )

    assert response.status_code == 200
    responder.post_message.assert_not_called()


def test_retry_header_returns_200_without_dispatch(relay_client: TestClient, responder: AsyncMock):
    """Slack retry deliveries are acknowledged without running the task again."""
    with patch(f"{_HANDLERS}.execute_task", new_callable=AsyncMock) as mock_execute:
        response = relay_client.post(
            "/slack/events",
            json=_message_payload("restart-api"),
            headers={"X-Slack-Retry-Num": "1"},
        )

    assert response.status_code == 200
    mock_execute.assert_not_called()
    responder.post_message.assert_not_called()


def test_unreachable_slack_still_returns_200(relay_client: TestClient):
    """A reply that cannot reach Slack does not fail the webhook request."""
    slack_client = AsyncMock()
    slack_client.chat_postMessage.side_effect = aiohttp.ClientConnectionError("down")
    app.dependency_overrides[get_responder] = lambda: SlackResponder(slack_client)

    response = relay_client.post("/slack/events", json=_message_payload("list"))

    assert response.status_code == 200
    slack_client.chat_postMessage.assert_awaited_once()
