"""
Pytest configuration for the Books Store API.

Provides fixtures for:
- A freshly seeded book store per test
- An application wired to that store
- A TestClient talking to the application
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from books_store_api.app.core.config import Settings
from books_store_api.app.main import create_app
from books_store_api.app.services.book_store import BookStore


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a small body limit so size checks stay cheap."""
    return Settings(log_level="DEBUG", max_body_bytes=1024)


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def app(test_settings: Settings, store: BookStore) -> FastAPI:
    return create_app(settings=test_settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
