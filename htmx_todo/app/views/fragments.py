"""
HTML rendering for the todo page and its htmx fragments.

Markup is built with plain string formatting.  Every value that can
originate from a client (todo text and ids) passes through
``html.escape`` before it is placed in the document, both in text
content and in attribute values.

The list container and the error container are addressed by id from
three places: the full page, the out‑of‑band fragments returned after
a successful create, and the ``HX-Retarget`` header of a failed
create.  The ids are therefore module constants.
"""

from __future__ import annotations

import html
from typing import Iterable, Optional, Sequence

from htmx_todo.app.core.htmx import (
    Attribute,
    HxSwap,
    hx_delete,
    hx_post,
    hx_reset_form_after_success,
    hx_swap,
    hx_swap_oob,
)
from htmx_todo.app.schemas.todo import TodoItem


TODO_LIST_ID = "todos"
ERROR_CONTAINER_ID = "todo-input-error"
FORM_ID = "todo-form"
TODO_FIELD = "todoItem"

INPUT_CLASSES = "border-gray-800 rounded-md border-2 m-4 px-3 py-1"
BUTTON_CLASSES = (
    "ring-offset-background focus-visible:ring-ring whitespace-nowrap rounded-md bg-black px-3 py-2 "
    "text-sm font-medium text-white transition-colors hover:bg-black/90 focus-visible:outline-none "
    "focus-visible:ring-2 focus-visible:ring-offset-2 disabled:pointer-events-none disabled:opacity-50"
)
ITEM_CLASSES = "border-gray-800 rounded-md border-2"


def selector(element_id: str) -> str:
    """CSS id selector for ``element_id``."""
    return f"#{element_id}"


def render_attributes(attributes: Iterable[Attribute]) -> str:
    """Render ``(name, value)`` pairs as a leading‑space attribute string."""
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attributes)


def tag(name: str, attributes: Sequence[Attribute] = (), content: str = "") -> str:
    """Render an element; ``content`` is inserted as is."""
    return f"<{name}{render_attributes(attributes)}>{content}</{name}>"


def todo_item(item: TodoItem) -> str:
    """Render one todo.

    Clicking the item issues ``DELETE /todo/{id}``; on success htmx
    removes the element itself, so the delete response needs no body.
    """
    return tag(
        "p",
        [
            ("id", item.id),
            ("class", ITEM_CLASSES),
            hx_delete(f"/todo/{item.id}"),
            hx_swap(HxSwap.DELETE),
        ],
        html.escape(item.text),
    )


def todo_list(items: Iterable[TodoItem]) -> str:
    return tag(
        "div",
        [("id", TODO_LIST_ID), ("class", "mb-2 space-y-1 min-w-10")],
        "".join(todo_item(item) for item in items),
    )


def todo_form() -> str:
    """Form posting ``todoItem`` to ``/todo``.

    The form itself is never swapped (``hx-swap="none"``); the response
    updates the page through out‑of‑band fragments or, on validation
    errors, through ``HX-Retarget``.
    """
    text_input = f'<input{render_attributes([("type", "text"), ("name", TODO_FIELD), ("class", INPUT_CLASSES)])}>'
    button = tag("button", [("type", "submit"), ("class", BUTTON_CLASSES)], "Add")
    return tag(
        "form",
        [
            ("id", FORM_ID),
            hx_post("/todo"),
            hx_swap(HxSwap.NONE),
            hx_reset_form_after_success(),
        ],
        text_input + button,
    )


def error_container(message: str = "", oob: bool = False) -> str:
    attributes: list = [("id", ERROR_CONTAINER_ID)]
    if oob:
        attributes.append(hx_swap_oob(True))
    return tag("div", attributes, html.escape(message))


def created_fragments(item: TodoItem) -> str:
    """Response body for a successful create.

    Two sibling out‑of‑band fragments: the new item prepended to the
    list container, and an empty error container replacing any error
    shown by a previous attempt.
    """
    prepend = tag(
        "div",
        [("id", TODO_LIST_ID), hx_swap_oob(HxSwap.AFTER_BEGIN)],
        todo_item(item),
    )
    return prepend + error_container(oob=True)


def base_page(title: str, body: str, htmx_src: str, body_classes: Optional[str] = "text-center bg-cyan-600") -> str:
    """Wrap ``body`` into a complete HTML document."""
    head = "".join(
        [
            tag("title", content=html.escape(title)),
            tag("script", [("src", htmx_src)]),
            tag("script", [("src", "https://cdn.tailwindcss.com/")]),
            tag("script", [("src", "/static/todo.js")]),
        ]
    )
    body_attributes = [("class", body_classes)] if body_classes else []
    return "<!DOCTYPE html>" + tag("html", content=tag("head", content=head) + tag("body", body_attributes, body))


def index_page(title: str, items: Iterable[TodoItem], htmx_src: str) -> str:
    """Full page: heading, entry form, error container and the list."""
    heading = tag("h1", [("class", "text-4xl font-bold underline")], "Todo test app")
    content = tag("div", content=heading + todo_form() + error_container() + todo_list(items))
    return base_page(title, content, htmx_src)
