"""
Top-level package for the Books Store API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``books_store_api.app.main:app``.
"""

__all__ = []
