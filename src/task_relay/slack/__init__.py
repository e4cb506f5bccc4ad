"""Slack ingress: webhook decoding, event filtering, command dispatch, and replies."""

from task_relay.slack.handlers import dispatch_command, handle_message_event, handle_slack_event
from task_relay.slack.notifier import Responder, SlackResponder
from task_relay.slack.router import router

__all__ = [
    "Responder",
    "SlackResponder",
    "dispatch_command",
    "handle_message_event",
    "handle_slack_event",
    "router",
]
