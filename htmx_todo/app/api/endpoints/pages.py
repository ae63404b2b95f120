"""
Full page rendering.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from htmx_todo.app.api.deps import get_todo_store
from htmx_todo.app.core.config import settings
from htmx_todo.app.services.todo_store import TodoStore
from htmx_todo.app.views.fragments import index_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Render the todo page")
def render_full_page(store: TodoStore = Depends(get_todo_store)) -> HTMLResponse:
    """Return the complete page with all current todos, newest first."""
    items = store.list_all_newest_first()
    logger.debug("Rendering page with %d todos", len(items))
    return HTMLResponse(index_page(settings.project_name, items, settings.htmx_src))
