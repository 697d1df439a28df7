# src/todo_client/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the controller.

The controller depends on Protocols instead of concrete implementations.
This keeps the REST transport and the user-facing surface swappable and makes testing easier.
"""

from typing import Protocol

from ..api.errors import ApiResult
from .models import DeletionAck, Task, TaskDraft, User


class TodoApi(Protocol):
    """REST client for users and tasks. Failures come back inside ApiResult, never raised."""

    async def list_users(self) -> ApiResult[list[User]]: ...
    async def list_tasks(self) -> ApiResult[list[Task]]: ...
    async def create_task(self, draft: TaskDraft) -> ApiResult[Task]: ...
    async def set_task_completed(self, task: Task, completed: bool) -> ApiResult[Task]: ...
    async def delete_task(self, task_id: int) -> ApiResult[DeletionAck]: ...


class Notifier(Protocol):
    """
    Surface-side port: how the controller shows a blocking message to the user.

    The connector decides how to present it (console line, dialog, ...).
    """

    def alert(self, message: str) -> None: ...
