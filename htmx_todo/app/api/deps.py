"""
FastAPI dependencies.

The todo store is created by ``create_app`` and kept on
``app.state``; endpoints obtain it through ``get_todo_store`` so that
tests can run against a fresh store per application instance.
"""

from fastapi import Request

from htmx_todo.app.services.todo_store import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.todo_store
