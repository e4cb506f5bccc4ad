"""Map free-text chat messages to a bounded set of intents."""

from task_relay.models.intents import (
    Deploy,
    Intent,
    InvalidDeployFormat,
    ListCommands,
    StaticTask,
    Unknown,
)
from task_relay.models.tasks import CommandTable

LIST_PHRASES = frozenset({"list", "list command"})
DEPLOY_PREFIX = "deploy "


def resolve_command(text: str, table: CommandTable) -> Intent:
    """Resolve a raw message to an intent.

    Matching is whole-message and case-insensitive, checked in order:
    list phrases, the deploy prefix, then static task keys. Deploy arguments
    come from the original text split on single spaces, so argument casing is
    preserved and doubled or trailing spaces yield InvalidDeployFormat. The
    prefix test ignores only leading whitespace, so a bare "deploy " is an
    invalid deploy rather than an unknown command.
    """
    normalized = text.strip().lower()

    if normalized in LIST_PHRASES:
        return ListCommands()

    if text.lstrip().lower().startswith(DEPLOY_PREFIX):
        args = text.split(" ")
        if len(args) != 3 or not all(args):
            return InvalidDeployFormat(text=text)
        return Deploy(service=args[1], env=args[2])

    task = table.tasks.get(normalized)
    if task is not None:
        return StaticTask(task=task)

    return Unknown(command=normalized)


def list_commands(table: CommandTable) -> list[str]:
    """Return the configured invocation phrases in file order."""
    return list(table.tasks)
