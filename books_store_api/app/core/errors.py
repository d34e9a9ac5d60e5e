"""
Error rendering for the API.

Handlers signal failures by raising ``HTTPException`` with a
human-readable ``detail``.  The handler registered here renders every
such exception as ``{"message": detail}`` so that clients always find
the reason under the same key, whether the error came from a route
(book not found) or from the router itself (unknown path, wrong
method).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an ``HTTPException`` as a ``{"message": ...}`` JSON body."""
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
