"""
Landing endpoint.
"""

from fastapi import APIRouter

from books_store_api.app.schemas.book import Welcome

router = APIRouter()

WELCOME_TITLE = "Welcome to Books Store"


@router.api_route("/", methods=["GET", "HEAD"], response_model=Welcome)
async def welcome() -> Welcome:
    """Return the static welcome payload."""
    return Welcome(title=WELCOME_TITLE)
