"""Resolved meanings of an inbound chat message."""

from pydantic import BaseModel, ConfigDict

from task_relay.models.tasks import Task


class ListCommands(BaseModel):
    """User asked for the available static commands."""

    model_config = ConfigDict(frozen=True)


class Deploy(BaseModel):
    """``deploy <service-name> <env>`` with caller casing preserved."""

    model_config = ConfigDict(frozen=True)

    service: str
    env: str


class InvalidDeployFormat(BaseModel):
    """Deploy prefix matched but the argument count was wrong. Terminal, reply-only."""

    model_config = ConfigDict(frozen=True)

    text: str


class StaticTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    task: Task


class Unknown(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str  # Normalized (trimmed, lowercased) message text


Intent = ListCommands | Deploy | InvalidDeployFormat | StaticTask | Unknown
