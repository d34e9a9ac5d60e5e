"""
Application package initializer.

This package contains the entrypoint of the API and its submodules:
``core`` (configuration, logging, request pipeline, error rendering),
``schemas`` (pydantic models), ``services`` (the book store) and
``api`` (routes).
"""

from .main import app, create_app  # noqa: F401
