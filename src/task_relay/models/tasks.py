"""Command table models: static tasks, the deployment template, and the table itself."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

SERVICE_PLACEHOLDER = "{service-name}"
ENV_PLACEHOLDER = "{env}"


class HttpMethod(str, Enum):
    """HTTP methods a static task can use."""

    GET = "GET"
    POST = "POST"


class Task(BaseModel):
    """A statically configured command -> URL/method/credential mapping."""

    model_config = ConfigDict(frozen=True)

    command: str = ""  # Display name; filled from the table key when empty
    url: str
    method: HttpMethod = HttpMethod.GET
    user: str | None = None
    token: str | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _coerce_method(cls, value: object) -> HttpMethod:
        """Only the exact string "POST" selects POST; everything else is GET."""
        if value == "POST":
            return HttpMethod.POST
        return HttpMethod.GET

    @property
    def has_credentials(self) -> bool:
        return bool(self.user and self.token)


class DeploymentTemplate(BaseModel):
    """Parameterized URL for dynamic ``deploy <service-name> <env>`` commands."""

    model_config = ConfigDict(frozen=True)

    user: str | None = None
    token: str | None = None
    url_format: str = ""

    def missing_placeholders(self) -> list[str]:
        return [p for p in (SERVICE_PLACEHOLDER, ENV_PLACEHOLDER) if p not in self.url_format]


class CommandTable(BaseModel):
    """Top-level relay configuration, loaded once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    slack_token: str = ""
    tasks: dict[str, Task] = Field(default_factory=dict)
    jenkins: DeploymentTemplate = Field(default_factory=DeploymentTemplate)

    @field_validator("tasks", mode="before")
    @classmethod
    def _normalize_keys(cls, value: object) -> object:
        """Lowercase invocation phrases and default each task's display name to its key.

        Keys that collide after lowercasing keep the last entry in file order.
        """
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        normalized: dict[str, object] = {}
        for key, task in value.items():
            if isinstance(task, dict) and not task.get("command"):
                task = {**task, "command": key}
            normalized[str(key).lower()] = task
        return normalized
