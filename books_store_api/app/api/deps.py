"""
FastAPI dependencies shared by the endpoint modules.
"""

from typing import Any

from fastapi import Request

from books_store_api.app.core.middleware import JSON_BODY_KEY
from books_store_api.app.services.book_store import BookStore


def get_store(request: Request) -> BookStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def get_json_body(request: Request) -> Any:
    """Return the payload decoded by the JSON body parser stage."""
    return getattr(request.state, JSON_BODY_KEY, {})
