"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the application needs no settings library.
Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo List")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file receiving a copy of the console log.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address of the HTTP server.  The port is fixed; only the
    # host can be changed through ``APP_HOST``.
    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = 8080

    # Source of the htmx script included in every page.  Point this at a
    # file under ``/static`` to serve htmx locally.
    htmx_src: str = os.getenv("HTMX_SRC", "https://unpkg.com/htmx.org@1.9.11")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
