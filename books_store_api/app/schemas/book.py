"""
Pydantic schemas for books.

A book is the only resource of the API: a string ``id`` assigned by
the store and a free-form ``title``.  The envelope models describe the
bodies returned by the mutating endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class BookRead(BaseModel):
    """Schema for reading a book."""

    id: str
    title: str


class BookUpdate(BaseModel):
    """Schema for updating a book.

    ``title`` is optional; an absent or empty title keeps the current
    one.
    """

    title: Optional[str] = None


class Welcome(BaseModel):
    title: str


class Message(BaseModel):
    """Body of every error response."""

    message: str


class BookAdded(BaseModel):
    message: str
    data: List[BookRead]


class BookUpdated(BaseModel):
    message: str
    data: BookRead


class BookDeleted(BaseModel):
    message: str
    book_deleted: List[BookRead] = Field(..., alias="bookDeleted")
