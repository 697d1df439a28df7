# src/todo_client/core/state.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from ..api.client import TodoApiClient
from ..app.controller import TodoController
from ..ui.dom import Page


@dataclass
class AppState:
    # Store Settings on the state for easy access in connectors/commands.
    settings: object

    api: TodoApiClient
    page: Page
    controller: TodoController

    # User actions scheduled by a connector and not finished yet.
    pending: set[asyncio.Task[None]] = field(default_factory=set)

    def schedule(self, coro) -> asyncio.Task[None]:
        """Run a user action as its own task; keep a reference until it finishes."""
        task = asyncio.get_running_loop().create_task(coro)
        self.pending.add(task)
        task.add_done_callback(self.pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for every scheduled action (no cancellation)."""
        while self.pending:
            await asyncio.gather(*list(self.pending), return_exceptions=True)
