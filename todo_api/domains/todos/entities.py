import copy
import uuid
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo:
    """Todo item entity"""

    def __init__(
        self,
        id: str,
        title: str,
        content: str = "",
        completed: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.completed = completed
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    @classmethod
    def create_todo(cls, title: str, content: Optional[str] = None) -> "Todo":
        """Build a new, not yet completed todo with a fresh id"""
        now = utcnow()
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            content=content or "",
            completed=False,
            created_at=now,
            updated_at=now
        )

    def apply_update(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None
    ) -> None:
        """Override the supplied fields and refresh updated_at.

        Empty strings for title or content count as "not provided" and keep
        the current value, so a client cannot blank a field by accident.
        """
        if title:
            self.title = title
        if content:
            self.content = content
        if completed is not None:
            self.completed = completed
        # updated_at never goes backwards, even if the wall clock does
        self.updated_at = max(utcnow(), self.updated_at)

    def copy(self) -> "Todo":
        return copy.copy(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Todo):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Todo(id={self.id}, title={self.title}, completed={self.completed})"
