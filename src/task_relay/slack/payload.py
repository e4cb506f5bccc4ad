"""Raw webhook body decoding as a FastAPI dependency."""

import json

from fastapi import HTTPException, Request
from starlette.requests import ClientDisconnect


async def read_slack_payload(request: Request) -> dict:
    """Read the raw body and decode it as a JSON object.

    Raises HTTPException(400) if the body cannot be read, is not valid JSON,
    or decodes to something other than an object.
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        raise HTTPException(status_code=400, detail="Can't read body")

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        raise HTTPException(status_code=400, detail="Can't parse JSON")

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Expected a JSON object")

    return payload
