# src/todo_client/api/errors.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class RequestError(Exception):
    """
    The only failure kind of the REST layer.

    Either `status` is set (server answered with a non-2xx code), or `cause`
    holds the transport/decoding exception that ended the request.
    """

    def __init__(self, status: int | None = None, *, cause: Exception | None = None) -> None:
        self.status = status
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.status is not None:
            return f"Error status {self.status}"
        if self.cause is not None:
            detail = str(self.cause).strip() or self.cause.__class__.__name__
            return f"Request failed: {detail}"
        return "Request failed."


@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """Success/failure variant returned by every client call."""

    value: T | None = None
    error: RequestError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ApiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: RequestError) -> ApiResult[T]:
        return cls(error=error)
