"""
Book endpoints.

These routes expose a CRUD API over the in-memory book store.  Reads
live under ``/books``; updates and deletions use the ``/update`` and
``/delete`` prefixes.  Every "not found" case answers HTTP 404 with a
``{"message": ...}`` body.
"""

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from books_store_api.app.api.deps import get_json_body, get_store
from books_store_api.app.schemas.book import (
    BookAdded,
    BookDeleted,
    BookRead,
    BookUpdate,
    BookUpdated,
    Message,
)
from books_store_api.app.services.book_store import BookStore

router = APIRouter()

BOOK_NOT_FOUND = "The Book is not Found"
BOOK_NOT_AVAILABLE = "The Book Is not Available"
BOOK_DELETE_NOT_FOUND = "Book is not found"
BOOK_ADDED = "New Book Added"
BOOK_DELETED = "Book is successfully Deleted"

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": Message}}

# HEAD is answered wherever GET is, with the same status and headers.
READ_METHODS = ["GET", "HEAD"]


@router.api_route("/books", methods=READ_METHODS, response_model=List[BookRead])
async def list_books(store: BookStore = Depends(get_store)) -> List[BookRead]:
    """Return every book in insertion order."""
    return store.list_books()


@router.api_route(
    "/books/{book_id}", methods=READ_METHODS, response_model=BookRead, responses=NOT_FOUND_RESPONSE
)
async def get_book(book_id: str, store: BookStore = Depends(get_store)) -> BookRead:
    """Retrieve a single book by ID.

    Returns HTTP 404 if the book is not found.
    """
    book = store.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return book


@router.post("/books", response_model=BookAdded)
async def add_book(store: BookStore = Depends(get_store)) -> BookAdded:
    """Add a book with a generated title.

    The request body is ignored.  The response carries the whole
    collection, new book included.
    """
    store.create_book()
    return BookAdded(message=BOOK_ADDED, data=store.list_books())


@router.put("/update/{book_id}", response_model=BookUpdated, responses=NOT_FOUND_RESPONSE)
async def update_book(
    book_id: str,
    body: Any = Depends(get_json_body),
    store: BookStore = Depends(get_store),
) -> BookUpdated:
    """Update the title of a book.

    The body may carry ``{"title": "..."}``.  A missing, empty or
    non-string title keeps the current one.
    """
    book_in = _parse_update(body)
    book = store.update_book(book_id, book_in.title)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_AVAILABLE)
    return BookUpdated(message=f"Book with Id {book_id} is updated", data=book)


@router.delete("/delete/{book_id}", response_model=BookDeleted, responses=NOT_FOUND_RESPONSE)
async def delete_book(book_id: str, store: BookStore = Depends(get_store)) -> BookDeleted:
    """Delete a book and return it wrapped in a one-element list."""
    book = store.delete_book(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_DELETE_NOT_FOUND)
    return BookDeleted(message=BOOK_DELETED, bookDeleted=[book])


def _parse_update(body: Any) -> BookUpdate:
    title = body.get("title") if isinstance(body, dict) else None
    if not isinstance(title, str):
        title = None
    return BookUpdate(title=title)
