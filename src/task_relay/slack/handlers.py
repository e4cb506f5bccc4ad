"""Slack event dispatch, message filtering, and command execution."""

import logging

from fastapi import HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from task_relay.models.intents import (
    Deploy,
    InvalidDeployFormat,
    ListCommands,
    StaticTask,
)
from task_relay.models.slack import MessageEvent, UrlVerification
from task_relay.models.tasks import CommandTable
from task_relay.slack.notifier import Responder
from task_relay.tasks.executor import build_deploy_url, execute_deployment, execute_task
from task_relay.tasks.replies import (
    INVALID_DEPLOY_REPLY,
    UNKNOWN_COMMAND_REPLY,
    command_list_reply,
    deploy_reply,
    task_reply,
)
from task_relay.tasks.resolver import list_commands, resolve_command

logger = logging.getLogger(__name__)


async def handle_slack_event(
    payload: dict,
    table: CommandTable,
    responder: Responder,
    timeout: float,
) -> Response:
    """Dispatch a decoded Slack payload.

    - url_verification: echo the challenge token
    - anything carrying an ``event`` object: filter and dispatch it
    - anything else: acknowledge with an empty 200
    """
    if payload.get("type") == "url_verification":
        try:
            verification = UrlVerification.model_validate(payload)
        except ValidationError:
            logger.warning("Malformed url_verification payload")
            raise HTTPException(status_code=400, detail="Error parsing challenge")
        return JSONResponse({"challenge": verification.challenge})

    raw_event = payload.get("event")
    if raw_event is None:
        return Response(status_code=200)

    try:
        event = MessageEvent.model_validate(raw_event)
    except ValidationError as exc:
        logger.warning("Ignoring malformed event: %d validation error(s)", exc.error_count())
        return Response(status_code=200)

    await handle_message_event(event, table, responder, timeout)
    return Response(status_code=200)


async def handle_message_event(
    event: MessageEvent,
    table: CommandTable,
    responder: Responder,
    timeout: float,
) -> None:
    """Apply message filters and dispatch the command.

    Filters (any match means no dispatch and no reply):
    1. Has bot_id -> message posted by a bot, including this relay
    2. Not a message event
    3. Has subtype (edits, joins, bot_message, etc.)
    4. Missing text or channel
    """
    if event.bot_id is not None:
        logger.debug("Ignoring message from bot %s", event.bot_id)
        return

    if event.type != "message":
        return

    if event.subtype is not None:
        return

    if event.text is None or not event.channel:
        logger.debug("Ignoring message event without text or channel")
        return

    logger.info("Message received in channel %s: %s", event.channel, event.text)
    await dispatch_command(event.text, event.channel, table, responder, timeout)


async def dispatch_command(
    text: str,
    channel_id: str,
    table: CommandTable,
    responder: Responder,
    timeout: float,
) -> None:
    """Resolve ``text`` to an intent, run at most one outbound call, and post one reply."""
    intent = resolve_command(text, table)

    if isinstance(intent, ListCommands):
        reply = command_list_reply(list_commands(table))

    elif isinstance(intent, Deploy):
        url = build_deploy_url(table.jenkins, intent.service, intent.env)
        logger.info("Triggering deployment of %s to %s at %s", intent.service, intent.env, url)
        success = await execute_deployment(
            url, table.jenkins.user, table.jenkins.token, timeout=timeout
        )
        reply = deploy_reply(intent.service, intent.env, success)

    elif isinstance(intent, InvalidDeployFormat):
        logger.info("Invalid deploy command: %s", intent.text)
        reply = INVALID_DEPLOY_REPLY

    elif isinstance(intent, StaticTask):
        logger.info("Executing task for command: %s", intent.task.command)
        success = await execute_task(intent.task, timeout=timeout)
        reply = task_reply(intent.task, success)

    else:
        logger.info("Unknown command: %s", intent.command)
        reply = UNKNOWN_COMMAND_REPLY

    await responder.post_message(channel_id, reply)
