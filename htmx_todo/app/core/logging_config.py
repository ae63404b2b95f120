"""
Logging setup for the todo server.

Every module logs through ``logging.getLogger(__name__)``; this module
only attaches handlers to the root logger.  Records always go to the
console and, when ``LOG_FILE`` is configured, to that file as well.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Console handler plus a UTF‑8 file handler for ``logfile`` if given."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        File receiving a copy of every record, resolved against the
        working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # ``create_app`` runs once per test, keep the first configuration.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in build_handlers(logfile):
        root.addHandler(handler)
