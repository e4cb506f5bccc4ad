"""Data models for the command table, resolved intents, and Slack payloads."""

from task_relay.models.intents import (
    Deploy,
    Intent,
    InvalidDeployFormat,
    ListCommands,
    StaticTask,
    Unknown,
)
from task_relay.models.slack import MessageEvent, UrlVerification
from task_relay.models.tasks import CommandTable, DeploymentTemplate, HttpMethod, Task

__all__ = [
    "CommandTable",
    "DeploymentTemplate",
    "HttpMethod",
    "Task",
    "Deploy",
    "Intent",
    "InvalidDeployFormat",
    "ListCommands",
    "StaticTask",
    "Unknown",
    "MessageEvent",
    "UrlVerification",
]
