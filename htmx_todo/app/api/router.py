"""
Top‑level router.

Aggregates the page and todo routers.  All paths are mounted at the
root because the htmx attributes rendered into the page refer to
them directly (``/`` and ``/todo``).
"""

from fastapi import APIRouter

from .endpoints import pages, todos

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(todos.router, prefix="/todo", tags=["todos"])
