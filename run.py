"""Entry point for the todo web server.

Starts the FastAPI application under Uvicorn.  The bind host is read
from the ``APP_HOST`` environment variable (default ``0.0.0.0``); the
port is fixed at 8080.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from htmx_todo.app.core.config import settings
from htmx_todo.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%d", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
