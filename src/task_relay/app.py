"""FastAPI application with lifespan, health endpoint, and server entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from task_relay.config import get_settings
from task_relay.logging_config import configure_logging
from task_relay.slack.notifier import SlackResponder
from task_relay.slack.router import router as slack_router
from task_relay.tasks.loader import load_command_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load the command table on startup.

    A ConfigError from the loader propagates and aborts startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    table = load_command_table(settings.config_path)
    token = settings.slack_bot_token or table.slack_token
    if not token:
        logger.warning("No Slack token configured; replies will fail")

    app.state.command_table = table
    app.state.responder = SlackResponder.from_token(token)
    yield


app = FastAPI(
    title="Task Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for container orchestration and local development."""
    return {
        "status": "ok",
        "service": "task-relay",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the relay under uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
