"""
In‑memory store for todo entries.

The store maps server generated identifiers to the todo text and keeps
insertion order so the list can be presented newest first.  It is the
single source of truth for the application and lives for as long as
the process does; nothing is persisted.

Requests are dispatched on Starlette's thread pool, so every public
method takes the same lock.  In particular ``add`` performs the
duplicate check and the insert inside one critical section, which
guarantees that two concurrent requests with the same text cannot both
succeed.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, List, Optional

from htmx_todo.app.schemas.todo import TodoItem


logger = logging.getLogger(__name__)


class TodoStore:
    """Thread‑safe, insertion‑ordered mapping of ``id -> text``."""

    def __init__(self) -> None:
        # dicts preserve insertion order; the newest entry is last.
        self._items: Dict[str, str] = {}
        self._lock = threading.Lock()

    def add(self, text: Optional[str]) -> Optional[str]:
        """Insert ``text`` as the newest entry and return its new id.

        Returns ``None`` without touching the store when ``text`` is
        missing, empty or exactly equal to a text that is already
        stored.

        Parameters
        ----------
        text : Optional[str]
            Todo text supplied by the client.

        Returns
        -------
        Optional[str]
            The generated identifier, or ``None`` if the text was
            rejected.
        """
        if not text:
            return None
        with self._lock:
            if text in self._items.values():
                logger.info("Rejected duplicate todo %r", text)
                return None
            todo_id = str(uuid.uuid4())
            # uuid4 collisions are not expected, but ids must never be reused.
            while todo_id in self._items:
                todo_id = str(uuid.uuid4())
            self._items[todo_id] = text
        logger.info("Created todo %s", todo_id)
        return todo_id

    def remove(self, todo_id: str) -> bool:
        """Remove the entry with ``todo_id``; return whether it existed."""
        with self._lock:
            removed = self._items.pop(todo_id, None) is not None
        if removed:
            logger.info("Deleted todo %s", todo_id)
        else:
            logger.info("Todo %s not found", todo_id)
        return removed

    def list_all_newest_first(self) -> List[TodoItem]:
        """Return a snapshot of all entries, most recently added first."""
        with self._lock:
            snapshot = list(self._items.items())
        return [TodoItem(id=todo_id, text=text) for todo_id, text in reversed(snapshot)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._items.values()
