"""
Main entrypoint for the Books Store API.

This module assembles the FastAPI application: it sets up logging,
attaches the book store, installs the request pipeline (request
logger, then JSON body parser) and includes the routes.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn directly::

    uvicorn books_store_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import json_body_parser, log_request
from .core.pipeline import PipelineMiddleware
from .services.book_store import BookStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[BookStore]
        Store backing the routes.  A freshly seeded store is created
        when omitted, so every application starts from the same two
        books.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = store if store is not None else BookStore()

    register_exception_handlers(app)
    app.add_middleware(
        PipelineMiddleware,
        stages=[log_request, json_body_parser(settings.max_body_bytes)],
    )
    app.include_router(router)

    logger.debug("Application created with %d books", len(app.state.store))
    return app


app = create_app()
