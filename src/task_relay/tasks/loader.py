"""Command table loading from the JSON config file."""

import logging
from pathlib import Path

from pydantic import ValidationError

from task_relay.models.tasks import CommandTable

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the command table file cannot be read or decoded."""


def load_command_table(path: str | Path) -> CommandTable:
    """Read and validate the command table at ``path``.

    Both an unreadable file and a document that does not decode into the
    CommandTable shape raise ConfigError; a partially valid file is never
    accepted.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        table = CommandTable.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    missing = table.jenkins.missing_placeholders()
    if table.jenkins.url_format and missing:
        logger.warning(
            "Deployment url_format is missing placeholder(s) %s: %s",
            ", ".join(missing),
            table.jenkins.url_format,
        )

    logger.info("Loaded %d task(s) from %s", len(table.tasks), path)
    return table
