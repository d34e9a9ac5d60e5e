"""
In-memory store for books.

The store keeps books in insertion order in a plain list and looks
them up with a linear scan.  It has no persistence: a new store starts
from the seed records and everything is lost when the process exits.

Identifiers come from a counter that only ever grows, so an id that
has been handed out is never issued again, even after the book that
carried it is deleted.

A store instance lives on ``app.state.store`` and is handed to the
route handlers through a FastAPI dependency.  Handlers run on the
event loop and none of the methods below await, so each call
completes without interleaving with other requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from books_store_api.app.schemas.book import BookRead

logger = logging.getLogger(__name__)

DEFAULT_SEED: Tuple[Tuple[str, str], ...] = (
    ("1", "Book 1"),
    ("2", "Book 2"),
)


@dataclass
class Book:
    id: str
    title: str


class BookStore:
    """Ordered collection of books held in process memory."""

    def __init__(self, seed: Iterable[Tuple[str, str]] = DEFAULT_SEED) -> None:
        self._books: List[Book] = []
        for book_id, title in seed:
            if self._find(book_id) is not None:
                raise ValueError(f"Duplicate book id in seed: {book_id!r}")
            self._books.append(Book(id=book_id, title=title))
        self._last_id = max(
            (int(book.id) for book in self._books if book.id.isdigit()),
            default=0,
        )

    def __len__(self) -> int:
        return len(self._books)

    def list_books(self) -> List[BookRead]:
        """Return all books in insertion order."""
        return [self._to_read(book) for book in self._books]

    def get_book(self, book_id: str) -> Optional[BookRead]:
        """Return the book with ``book_id`` or ``None`` if absent."""
        book = self._find(book_id)
        if book is None:
            return None
        return self._to_read(book)

    def create_book(self, title: Optional[str] = None) -> BookRead:
        """Append a new book and return it.

        The id is the next counter value.  Without a ``title`` the book
        is named after its id, e.g. ``"Books 3"``.
        """
        self._last_id += 1
        book_id = str(self._last_id)
        book = Book(id=book_id, title=title if title is not None else f"Books {book_id}")
        self._books.append(book)
        logger.info("Created book %s", book_id)
        return self._to_read(book)

    def update_book(self, book_id: str, title: Optional[str]) -> Optional[BookRead]:
        """Change the title of a book.

        An empty or missing ``title`` leaves the current title in
        place.  Returns the book after the update, or ``None`` if no
        book has ``book_id``.
        """
        book = self._find(book_id)
        if book is None:
            return None
        if title:
            book.title = title
            logger.info("Updated book %s", book_id)
        return self._to_read(book)

    def delete_book(self, book_id: str) -> Optional[BookRead]:
        """Remove a book and return it, or ``None`` if absent."""
        for index, book in enumerate(self._books):
            if book.id == book_id:
                del self._books[index]
                logger.info("Deleted book %s", book_id)
                return self._to_read(book)
        return None

    def _find(self, book_id: str) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    @staticmethod
    def _to_read(book: Book) -> BookRead:
        return BookRead(id=book.id, title=book.title)
