"""JSON log lines on stdout for the relay process.

Every record carries `severity`, `timestamp` and `logger` keys plus a fixed
`service` tag, so task outcomes and Slack failures can be filtered by a log
collector without parsing free text.
"""

import copy
import logging
import logging.config

# Python's record attribute -> emitted key
FIELD_RENAMES = {
    "levelname": "severity",
    "asctime": "timestamp",
    "name": "logger",
}

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "relay_json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": FIELD_RENAMES,
            "static_fields": {"service": "task-relay"},
        },
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "formatter": "relay_json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"level": "INFO", "handlers": ["stdout"]},
}


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger at ``level``.

    The FastAPI lifespan calls this once with ``Settings.log_level``.
    Unrecognized level names run at INFO instead of failing startup.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    config["root"]["level"] = level_name
    logging.config.dictConfig(config)
