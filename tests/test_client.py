"""Tests for the requests based API client."""

from unittest.mock import Mock

import pytest
import requests

from books_store_client import BooksStoreClient


def make_response(status_code=200, payload=None, text=""):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if payload is None:
        response.content = b""
        response.json.side_effect = ValueError("no json")
    else:
        response.content = b"{}"
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return BooksStoreClient(base_url="http://books.test/", session=session, timeout=3)


def test_list_books(api, session):
    session.request.return_value = make_response(payload=[{"id": "1", "title": "Book 1"}])

    books, error = api.list_books()

    assert error is None
    assert books == [{"id": "1", "title": "Book 1"}]
    session.request.assert_called_once_with(
        method="GET", url="http://books.test/books", json=None, timeout=3
    )


def test_get_book_not_found_reports_server_message(api, session):
    session.request.return_value = make_response(404, {"message": "The Book is not Found"})

    book, error = api.get_book(7)

    assert book is None
    assert error == {"status_code": 404, "message": "The Book is not Found"}
    assert session.request.call_args.kwargs["url"] == "http://books.test/books/7"


def test_path_segments_are_quoted(api, session):
    session.request.return_value = make_response(payload={"id": "a/b", "title": "t"})

    api.get_book("a/b")

    assert session.request.call_args.kwargs["url"] == "http://books.test/books/a%2Fb"


def test_add_book_returns_last_entry(api, session):
    session.request.return_value = make_response(
        payload={"message": "New Book Added", "data": [{"id": "1", "title": "Book 1"}, {"id": "3", "title": "Books 3"}]}
    )

    book, error = api.add_book()

    assert error is None
    assert book == {"id": "3", "title": "Books 3"}
    assert session.request.call_args.kwargs["method"] == "POST"


def test_update_book_sends_title(api, session):
    session.request.return_value = make_response(
        payload={"message": "Book with Id 1 is updated", "data": {"id": "1", "title": "New"}}
    )

    book, error = api.update_book("1", title="New")

    assert error is None
    assert book == {"id": "1", "title": "New"}
    kwargs = session.request.call_args.kwargs
    assert (kwargs["method"], kwargs["url"], kwargs["json"]) == ("PUT", "http://books.test/update/1", {"title": "New"})


def test_update_book_without_title_sends_empty_object(api, session):
    session.request.return_value = make_response(payload={"message": "m", "data": {"id": "1", "title": "Book 1"}})

    api.update_book("1")

    assert session.request.call_args.kwargs["json"] == {}


def test_delete_book_unwraps_deleted_record(api, session):
    session.request.return_value = make_response(
        payload={"message": "Book is successfully Deleted", "bookDeleted": [{"id": "2", "title": "Book 2"}]}
    )

    book, error = api.delete_book("2")

    assert error is None
    assert book == {"id": "2", "title": "Book 2"}
    assert session.request.call_args.kwargs["url"] == "http://books.test/delete/2"


def test_http_error_without_json_uses_text(api, session):
    session.request.return_value = make_response(400, text="Bad Request")

    data, error = api.welcome()

    assert data is None
    assert error == {"status_code": 400, "message": "Bad Request"}


def test_transport_error_is_reported(api, session, caplog):
    session.request.side_effect = requests.ConnectionError("connection refused")

    books, error = api.list_books()

    assert books == []
    assert error == {"status_code": None, "message": "connection refused"}
    assert "API request failed" in caplog.text
