"""
Logging configuration for the Books Store API.

``setup_logging`` configures the root logger from the application
settings: a console handler always, a file handler when ``log_file``
is set.  Every request is already logged by the pipeline's request
logger, so uvicorn's own access log is silenced unless the service
runs in debug mode.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, ``INFO`` if unknown."""
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure logging for the service, once per process.

    If the root logger already has handlers (a second ``create_app``
    call, or a test runner capturing logs) nothing is changed.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(settings.log_level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not settings.debug:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
