from typing import Any

import ujson
from fastapi import Request

from blog_api.exceptions import MalformedBodyException
from blog_api.services.post_service import PostService

JSON_CONTENT_TYPE = "application/json"


def post_service(request: Request) -> PostService:
    return PostService(request.app.state.context.post_repository)


async def json_body(request: Request) -> dict[str, Any]:
    """Request body as a JSON object, or an empty dict when there is none."""
    if JSON_CONTENT_TYPE not in request.headers.get("content-type", ""):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = ujson.loads(raw)
    except ValueError as exc:
        raise MalformedBodyException("Malformed JSON in request body") from exc
    return body if isinstance(body, dict) else {}
