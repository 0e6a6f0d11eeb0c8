"""In-memory todo collection guarded by a single lock."""

import asyncio
import logging
from typing import List, Optional

from todo_api.domains.todos.entities import Todo
from todo_api.domains.todos.exceptions import TodoConflictError, TodoNotFoundError

logger = logging.getLogger(__name__)


class TodoStore:
    """Authoritative collection of todos.

    Every operation, read or write, holds the same lock for its whole
    duration, so at most one operation runs against the collection at a
    time. Records are kept in insertion order and handed out as copies.
    """

    def __init__(self) -> None:
        self._todos: List[Todo] = []
        self._lock = asyncio.Lock()

    async def list(self, page: int = 1, limit: int = 10) -> List[Todo]:
        """Return one page of todos in insertion order"""
        page = max(page, 1)
        limit = max(limit, 0)
        offset = (page - 1) * limit

        async with self._lock:
            return [todo.copy() for todo in self._todos[offset:offset + limit]]

    async def count(self) -> int:
        async with self._lock:
            return len(self._todos)

    async def create(self, title: str, content: Optional[str] = None) -> Todo:
        """Add a new todo; titles must be unique"""
        async with self._lock:
            if any(todo.title == title for todo in self._todos):
                logger.warning(f"Rejected duplicate todo title '{title}'")
                raise TodoConflictError(title)

            todo = Todo.create_todo(title=title, content=content)
            self._todos.append(todo)
            logger.info(f"Created todo {todo.id}")
            return todo.copy()

    async def get(self, todo_id: str) -> Todo:
        async with self._lock:
            return self._find(todo_id).copy()

    async def update(
        self,
        todo_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None
    ) -> Todo:
        """Apply a partial update; id and created_at never change.

        Title uniqueness is only enforced by create.
        """
        async with self._lock:
            todo = self._find(todo_id)
            todo.apply_update(title=title, content=content, completed=completed)
            logger.info(f"Updated todo {todo_id}")
            return todo.copy()

    async def delete(self, todo_id: str) -> None:
        async with self._lock:
            todo = self._find(todo_id)
            self._todos.remove(todo)
            logger.info(f"Deleted todo {todo_id}")

    def _find(self, todo_id: str) -> Todo:
        # Callers must hold the lock
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        logger.warning(f"Todo {todo_id} not found")
        raise TodoNotFoundError(todo_id)
