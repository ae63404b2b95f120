"""
Todo endpoints.

These routes are called by htmx rather than by regular page
navigation, and answer with HTML fragments or bare status codes:

* ``POST /todo`` adds a todo and answers with two out‑of‑band
  fragments, one prepending the new item to the list and one clearing
  the error container.  Invalid input is answered with 422 and
  ``HX-Retarget``/``HX-Reswap`` headers that send the error message
  into the error container instead.
* ``DELETE /todo/{todo_id}`` removes a todo.  The item element deletes
  itself in the browser (``hx-swap="delete"``), so the response carries
  no body; 404 signals an unknown id, including ids containing a
  slash.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Response, status
from fastapi.responses import HTMLResponse

from htmx_todo.app.api.deps import get_todo_store
from htmx_todo.app.core.htmx import HxSwap, retarget_headers
from htmx_todo.app.schemas.todo import TodoItem
from htmx_todo.app.services.todo_store import TodoStore
from htmx_todo.app.views.fragments import ERROR_CONTAINER_ID, created_fragments, selector

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_TODO_MESSAGE = "Error: Todo is empty or already exists!"


@router.post("", response_class=HTMLResponse, summary="Create a todo")
def create_todo(
    todo_item: Optional[str] = Form(None, alias="todoItem"),
    store: TodoStore = Depends(get_todo_store),
) -> HTMLResponse:
    """Add ``todoItem`` to the store and return the out‑of‑band fragments.

    The store rejects empty and duplicate texts atomically; a rejection
    is reported with 422 and retargeted into the error container.
    """
    logger.debug("Create request for %r", todo_item)
    todo_id = store.add(todo_item)
    if todo_id is None:
        return HTMLResponse(
            INVALID_TODO_MESSAGE,
            status_code=422,
            headers=retarget_headers(selector(ERROR_CONTAINER_ID), HxSwap.INNER_HTML),
        )
    return HTMLResponse(created_fragments(TodoItem(id=todo_id, text=todo_item)))


@router.delete("/{todo_id:path}", summary="Delete a todo")
def delete_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)) -> Response:
    """Remove the todo; 200 if it existed, 404 otherwise.  No body either way."""
    if store.remove(todo_id):
        return Response(status_code=status.HTTP_200_OK)
    return Response(status_code=status.HTTP_404_NOT_FOUND)
