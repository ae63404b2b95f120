"""
Application package initializer.

The application is split into a few small pieces: ``core`` holds
settings, logging and the htmx wire vocabulary, ``services`` owns the
in‑memory todo store, ``views`` renders HTML fragments and ``api``
wires them together into HTTP endpoints.
"""

from .main import app  # noqa: F401
