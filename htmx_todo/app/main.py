"""
Main entrypoint for the todo application.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory todo store, includes the routers, mounts the
static assets and installs the catch‑all error handler.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn htmx_todo.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.todo_store import TodoStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Turn any uncaught exception into a plain 500 response."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(f"500: {exc!r}", status_code=500)


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[TodoStore]
        Store to serve.  A new, empty store is created when omitted;
        each application instance owns exactly one store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name)
    app.state.todo_store = store if store is not None else TodoStore()

    app.include_router(router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Application %r configured", settings.project_name)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
