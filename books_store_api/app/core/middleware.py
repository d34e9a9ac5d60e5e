"""
Pipeline stages installed in front of every route.

``log_request`` writes one log line per incoming request.
``json_body_parser`` builds the JSON body stage: it decodes
``application/json`` payloads into ``request.state.json_body`` and
rejects payloads that are too large or not well-formed, the same way
``express.json()`` does with its default options.
"""

import json
import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from .pipeline import CONTINUE, BodyTooLarge, RequestContext, Stage, StageResult

logger = logging.getLogger(__name__)

JSON_BODY_KEY = "json_body"

MALFORMED_PAYLOAD_MESSAGE = "Malformed JSON payload"
PAYLOAD_TOO_LARGE_MESSAGE = "request entity too large"

# Renamed from HTTP_413_REQUEST_ENTITY_TOO_LARGE in recent Starlette releases.
HTTP_413_CONTENT_TOO_LARGE = getattr(status, "HTTP_413_CONTENT_TOO_LARGE", 413)


async def log_request(context: RequestContext) -> StageResult:
    """Log the method and URL of the request, then continue."""
    logger.info("%s %s", context.method, context.url)
    return CONTINUE


def is_json_content_type(content_type: str) -> bool:
    """Return ``True`` for ``application/json`` and ``*/*+json`` types."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type:
        return False
    return media_type == "application/json" or media_type.endswith("+json")


def json_body_parser(max_body_bytes: int = 100 * 1024) -> Stage:
    """Create the body parsing stage.

    Parameters
    ----------
    max_body_bytes : int
        Largest accepted payload.  Bigger JSON bodies are answered with
        HTTP 413, as soon as ``Content-Length`` announces them or the
        bytes received pass the limit.

    Returns
    -------
    Stage
        A pipeline stage.  Requests without a JSON content type, and
        JSON requests with an empty body, get an empty ``dict`` as
        ``request.state.json_body``.  The body of a non-JSON request
        is never read by the stage.
    """

    async def parse_json_body(context: RequestContext) -> StageResult:
        context.state[JSON_BODY_KEY] = {}
        if not is_json_content_type(context.headers.get("content-type", "")):
            return CONTINUE

        declared = context.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > max_body_bytes:
            return _too_large(context, int(declared), max_body_bytes)
        try:
            body = await context.read_body(limit=max_body_bytes)
        except BodyTooLarge as exc:
            return _too_large(context, exc.size, max_body_bytes)
        if not body:
            return CONTINUE

        try:
            payload: Any = json.loads(body.decode("utf-8"), parse_constant=_reject_constant)
        except ValueError as exc:
            # Covers JSONDecodeError, UnicodeDecodeError and NaN/Infinity.
            logger.warning("Rejected %s %s: %s", context.method, context.path, exc)
            return _malformed()

        # Strict mode: only objects and arrays are accepted at the top level.
        if not isinstance(payload, (dict, list)):
            logger.warning(
                "Rejected %s %s: top-level JSON value is %s",
                context.method,
                context.path,
                type(payload).__name__,
            )
            return _malformed()

        context.state[JSON_BODY_KEY] = payload
        return CONTINUE

    return parse_json_body


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _too_large(context: RequestContext, size: int, limit: int) -> JSONResponse:
    logger.warning(
        "Rejected %s %s: body of at least %d bytes exceeds %d",
        context.method,
        context.path,
        size,
        limit,
    )
    return JSONResponse(
        status_code=HTTP_413_CONTENT_TOO_LARGE,
        content={"message": PAYLOAD_TOO_LARGE_MESSAGE},
    )


def _malformed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": MALFORMED_PAYLOAD_MESSAGE},
    )
