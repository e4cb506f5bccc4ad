"""Slack webhook router."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from task_relay.config import Settings, get_settings
from task_relay.slack.dependencies import get_command_table, get_responder
from task_relay.models.tasks import CommandTable
from task_relay.slack.handlers import handle_slack_event
from task_relay.slack.notifier import Responder
from task_relay.slack.payload import read_slack_payload

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    payload: dict = Depends(read_slack_payload),
    table: CommandTable = Depends(get_command_table),
    responder: Responder = Depends(get_responder),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Receive Slack webhook events.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    so a slow task is not triggered twice.
    """
    if request.headers.get("X-Slack-Retry-Num"):
        return Response(status_code=200)

    return await handle_slack_event(
        payload, table, responder, settings.outbound_timeout_seconds
    )
