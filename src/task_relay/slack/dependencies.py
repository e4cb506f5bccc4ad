"""FastAPI dependencies exposing state the application lifespan stores on app.state."""

from fastapi import Request

from task_relay.models.tasks import CommandTable
from task_relay.slack.notifier import Responder


def get_command_table(request: Request) -> CommandTable:
    return request.app.state.command_table


def get_responder(request: Request) -> Responder:
    return request.app.state.responder
