"""Tests for settings and logging setup."""

import importlib
import logging
from contextlib import contextmanager

from books_store_api.app.core import config
from books_store_api.app.core.config import Settings
from books_store_api.app.core.logging_config import resolve_level, setup_logging


@contextmanager
def bare_root_logger():
    """Detach the root logger's handlers, pytest's capture handlers included.

    Must be entered inside the test body: pytest attaches its handlers
    around the call phase, after fixtures have run.
    """
    root = logging.getLogger()
    access = logging.getLogger("uvicorn.access")
    saved_handlers, saved_level, saved_access_level = root.handlers[:], root.level, access.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        access.setLevel(saved_access_level)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("MAX_BODY_BYTES", "2048")
    monkeypatch.setenv("PROJECT_NAME", "Library")
    try:
        reloaded = importlib.reload(config)
        settings = reloaded.Settings()
        assert settings.port == 8080
        assert settings.debug is True
        assert settings.max_body_bytes == 2048
        assert settings.project_name == "Library"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "DEBUG", "LOG_FILE", "MAX_BODY_BYTES"):
        monkeypatch.delenv(name, raising=False)
    try:
        settings = importlib.reload(config).Settings()
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.debug is False
        assert settings.log_file is None
        assert settings.max_body_bytes == 100 * 1024
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_setup_logging_adds_console_and_file_handlers(tmp_path):
    logfile = tmp_path / "books.log"

    with bare_root_logger() as root:
        setup_logging(Settings(log_level="debug", log_file=str(logfile)))
        logging.getLogger("books_store_api.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert isinstance(root.handlers[1], logging.FileHandler)

    assert "[DEBUG] books_store_api.test: hello file" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once():
    with bare_root_logger() as root:
        setup_logging(Settings(log_level="INFO", log_file=None))
        setup_logging(Settings(log_level="DEBUG", log_file=None))

        assert len(root.handlers) == 1
        assert root.level == logging.INFO


def test_setup_logging_keeps_existing_handlers():
    with bare_root_logger() as root:
        existing = logging.NullHandler()
        root.addHandler(existing)

        setup_logging(Settings(log_level="DEBUG", log_file=None))

        assert root.handlers == [existing]


def test_setup_logging_silences_access_log_outside_debug():
    with bare_root_logger():
        setup_logging(Settings(log_file=None, debug=False))

        assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("Warning") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO
    # A module attribute that is not a level.
    assert resolve_level("basic_format") == logging.INFO
