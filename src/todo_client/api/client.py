# src/todo_client/api/client.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from ..core.models import DeletionAck, Task, TaskDraft, User
from .errors import ApiResult, RequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_HEADERS = {"Content-type": "application/json; charset=UTF-8"}


def create_http_client(base_url: str, *, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Build the shared AsyncClient.

    No timeouts and no retries: a request runs until it completes or fails,
    and the first failure ends the operation.
    """
    return httpx.AsyncClient(base_url=base_url, timeout=None, transport=transport)


def _as_list(payload: Any, parse: Callable[[Any], T]) -> list[T]:
    if not isinstance(payload, list):
        raise ValueError(f"Expected JSON array, got {type(payload).__name__}")
    return [parse(item) for item in payload]


def _as_ack(payload: Any) -> DeletionAck:
    return payload if isinstance(payload, dict) else {}


class TodoApiClient:
    """
    Thin wrapper over the four REST endpoints (/users, /todos, /todos/{id}).

    Every non-2xx status, transport error or undecodable body collapses into a
    single RequestError returned inside ApiResult. Nothing is raised to callers.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        *,
        body: dict[str, Any] | None = None,
    ) -> ApiResult[T]:
        logger.debug("API: %s %s body=%s", method, path, body)
        try:
            if body is None:
                response = await self._http.request(method, path)
            else:
                response = await self._http.request(method, path, json=body, headers=JSON_HEADERS)
        except httpx.HTTPError as e:
            logger.warning("API: %s %s failed (%s)", method, path, e.__class__.__name__)
            return ApiResult.failure(RequestError(cause=e))

        if not response.is_success:
            logger.warning("API: %s %s -> HTTP %s", method, path, response.status_code)
            return ApiResult.failure(RequestError(response.status_code))

        try:
            value = parse(response.json())
        except ValueError as e:
            logger.warning("API: %s %s returned an unreadable body: %s", method, path, e)
            return ApiResult.failure(RequestError(cause=e))

        logger.debug("API: %s %s -> HTTP %s", method, path, response.status_code)
        return ApiResult.success(value)

    async def list_users(self) -> ApiResult[list[User]]:
        return await self._request("GET", "/users", lambda p: _as_list(p, User.from_json))

    async def list_tasks(self) -> ApiResult[list[Task]]:
        return await self._request("GET", "/todos", lambda p: _as_list(p, Task.from_json))

    async def create_task(self, draft: TaskDraft) -> ApiResult[Task]:
        return await self._request("POST", "/todos", Task.from_json, body=draft.to_json())

    async def set_task_completed(self, task: Task, completed: bool) -> ApiResult[Task]:
        """PATCH only the `completed` field of an existing task."""
        return await self._request(
            "PATCH",
            f"/todos/{task.id}",
            Task.from_json,
            body={"completed": completed},
        )

    async def delete_task(self, task_id: int) -> ApiResult[DeletionAck]:
        return await self._request("DELETE", f"/todos/{task_id}", _as_ack)
