"""Plain-text replies posted back to the originating channel."""

from task_relay.models.tasks import Task

UNKNOWN_COMMAND_REPLY = "I don't know your message. Please try again."
INVALID_DEPLOY_REPLY = "Invalid deploy command format. Use: deploy <service-name> <env>"


def command_list_reply(commands: list[str]) -> str:
    lines = "".join(f"- {command}\n" for command in commands)
    return f"Here are the available commands:\n{lines}"


def task_reply(task: Task, success: bool) -> str:
    if success:
        return f"Task '{task.command}' executed successfully."
    return f"Task '{task.command}' failed to execute."


def deploy_reply(service: str, env: str, success: bool) -> str:
    if success:
        return (
            f"Jenkins job for service '{service}' in environment '{env}' "
            "executed successfully."
        )
    return f"Failed to execute Jenkins job for service '{service}' in environment '{env}'."
