"""Command dispatch core: table loading, intent resolution, and task execution."""

from task_relay.tasks.executor import build_deploy_url, execute_deployment, execute_task
from task_relay.tasks.loader import ConfigError, load_command_table
from task_relay.tasks.resolver import list_commands, resolve_command

__all__ = [
    "ConfigError",
    "build_deploy_url",
    "execute_deployment",
    "execute_task",
    "list_commands",
    "load_command_table",
    "resolve_command",
]
