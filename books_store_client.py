"""Books Store API client.

A thin wrapper around the HTTP surface of the Books Store API built on
the ``requests`` library.  It exposes one method per route:

* :meth:`BooksStoreClient.welcome` – the landing payload.
* :meth:`BooksStoreClient.list_books` – all books.
* :meth:`BooksStoreClient.get_book` – a single book by its identifier.
* :meth:`BooksStoreClient.add_book` – add a book with a generated title.
* :meth:`BooksStoreClient.update_book` – change the title of a book.
* :meth:`BooksStoreClient.delete_book` – remove a book.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` (or an empty list for
:meth:`list_books`) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  The client never raises for HTTP or
transport errors; it logs them and reports them through ``error``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BooksStoreClient:
    """Client for the Books Store API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _quote(book_id: Any) -> str:
        return quote(str(book_id), safe="")

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def welcome(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the landing payload, ``{"title": ...}``."""
        return self._request("GET", "/")

    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all books.

        Returns:
            A tuple ``(books, error)``.  ``books`` is empty on failure.
        """
        data, error = self._request("GET", "/books")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single book by ID."""
        return self._request("GET", f"/books/{self._quote(book_id)}")

    def add_book(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a book.  The server chooses its id and title.

        Returns:
            A tuple ``(book, error)`` where ``book`` is the newly added
            book, taken from the end of the list the server returns.
        """
        data, error = self._request("POST", "/books")
        if error:
            return None, error
        books = data.get("data") if isinstance(data, dict) else None
        if not books:
            return None, None
        return books[-1], None

    def update_book(
        self, book_id: Any, title: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the title of a book.

        Args:
            book_id: Identifier of the book.
            title: New title.  When ``None`` the server keeps the
                current title.
        Returns:
            A tuple ``(book, error)`` with the book after the update.
        """
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        data, error = self._request("PUT", f"/update/{self._quote(book_id)}", json_body=payload)
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("data"), None
        return None, None

    def delete_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a book.

        Returns:
            A tuple ``(book, error)`` with the removed book.
        """
        data, error = self._request("DELETE", f"/delete/{self._quote(book_id)}")
        if error:
            return None, error
        deleted = data.get("bookDeleted") if isinstance(data, dict) else None
        if not deleted:
            return None, None
        return deleted[0], None
