# src/todo_client/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _opt_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class User:
    """An account that can own tasks. Other server fields are ignored."""

    id: int | None
    name: str | None

    @classmethod
    def from_json(cls, raw: Any) -> User:
        if not isinstance(raw, dict):
            return cls(id=None, name=None)
        name = raw.get("name")
        return cls(id=_opt_int(raw.get("id")), name=None if name is None else str(name))


@dataclass(frozen=True, slots=True)
class Task:
    """
    A to-do item as the server knows it.

    `user_id` maps to the camelCase `userId` wire field.
    """

    id: int | None
    title: str | None
    completed: bool
    user_id: int | None

    @classmethod
    def from_json(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            return cls(id=None, title=None, completed=False, user_id=None)
        title = raw.get("title")
        return cls(
            id=_opt_int(raw.get("id")),
            title=None if title is None else str(title),
            completed=bool(raw.get("completed", False)),
            user_id=_opt_int(raw.get("userId")),
        )


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """Body of a create request."""

    title: str
    user_id: int
    completed: bool = False

    def to_json(self) -> dict[str, Any]:
        return {"title": self.title, "completed": self.completed, "userId": self.user_id}


DeletionAck = dict[str, Any]
# Decoded DELETE response body (jsonplaceholder answers with {}).
