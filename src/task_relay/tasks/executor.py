"""Outbound HTTP calls for static tasks and templated deployments.

Both entry points share one send-and-classify routine: a single request with
an explicit timeout, no retries, response body discarded. Status codes in
[200, 300) are success; any other status, a timeout, a transport error, or an
unusable URL is failure. Causes are logged here and never reach the chat user.
"""

import base64
import logging

import httpx

from task_relay.models.tasks import (
    ENV_PLACEHOLDER,
    SERVICE_PLACEHOLDER,
    DeploymentTemplate,
    HttpMethod,
    Task,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def basic_auth_header(user: str | None, token: str | None) -> str:
    """Build an ``Authorization`` value: ``Basic base64(user:token)``, standard alphabet."""
    credentials = f"{user or ''}:{token or ''}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def build_deploy_url(template: DeploymentTemplate, service: str, env: str) -> str:
    """Substitute the first occurrence of each placeholder verbatim. Values are not validated."""
    url = template.url_format.replace(SERVICE_PLACEHOLDER, service, 1)
    return url.replace(ENV_PLACEHOLDER, env, 1)


async def execute_task(task: Task, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> bool:
    """Call a static task's URL.

    Basic Authentication is attached only to POST tasks with both user and
    token configured; GET tasks never send credentials.
    """
    headers: dict[str, str] = {}
    if task.method == HttpMethod.POST and task.has_credentials:
        headers["Authorization"] = basic_auth_header(task.user, task.token)

    return await _send(
        task.method.value,
        task.url,
        headers,
        timeout,
        label=f"Task '{task.command}'",
    )


async def execute_deployment(
    url: str,
    user: str | None,
    token: str | None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> bool:
    """POST to a rendered deployment URL. The Authorization header is always sent."""
    headers = {"Authorization": basic_auth_header(user, token)}
    return await _send(HttpMethod.POST.value, url, headers, timeout, label="Deployment job")


async def _send(
    method: str,
    url: str,
    headers: dict[str, str],
    timeout: float,
    label: str,
) -> bool:
    """Send one request and classify the outcome as success or failure."""
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as client:
            response = await client.request(method, url, headers=headers)
    except httpx.TimeoutException:
        logger.warning("%s timed out after %.1fs at %s", label, timeout, url)
        return False
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("%s failed at %s: %s", label, url, exc)
        return False

    if is_success(response.status_code):
        logger.info("%s succeeded at %s, status %d", label, url, response.status_code)
        return True

    logger.warning("%s failed at %s, status %d", label, url, response.status_code)
    return False
