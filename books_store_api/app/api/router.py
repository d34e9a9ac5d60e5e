"""
Top-level router of the API.

Aggregates the endpoint modules.  Routes are mounted at the root of
the application, without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import books, home

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(books.router, tags=["books"])
