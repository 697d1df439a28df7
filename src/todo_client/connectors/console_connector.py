# src/todo_client/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..cli.commands import format_task_list, format_user_options
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

LineReader = Callable[[str], Awaitable[str]]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


class ConsoleNotifier:
    """Shows blocking user messages as a highlighted console line."""

    def alert(self, message: str) -> None:
        _print_ts(f"[ALERT] {message}")


async def read_line(prompt: str) -> str:
    """
    Read one line from stdin without tying up the loop's executor.

    input() runs in a daemon thread: if the awaiting task is cancelled (Ctrl+C),
    shutdown does not wait for a thread still blocked on stdin.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(result: str | None, exc: BaseException | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(result or "")

    def _worker() -> None:
        try:
            line = input(prompt)
        except Exception as e:
            outcome: tuple[str | None, BaseException | None] = (None, e)
        else:
            outcome = (line, None)
        try:
            loop.call_soon_threadsafe(_deliver, *outcome)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this line.
            pass

    threading.Thread(target=_worker, name="console-input", daemon=True).start()
    return await fut


async def run_console_loop(state: AppState, *, reader: LineReader = read_line) -> None:
    logger.info("Console connector started.")

    await state.controller.load()
    _print_ts("[CONSOLE] Tasks:")
    print(format_task_list(state.page))
    print()
    _print_ts("[CONSOLE] Users:")
    print(format_user_options(state.page))
    print()
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        _print_ts(text)

    while True:
        try:
            user_input = (await reader(">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except (KeyboardInterrupt, asyncio.CancelledError):
            logger.info("Console interrupted, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = await command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list them."

        _print_ts(reply)
        # Let freshly scheduled actions start their request before the next prompt.
        await asyncio.sleep(0)

    if state.pending:
        _print_ts(f"Waiting for {len(state.pending)} pending action(s)...")
    logger.info("Console connector finished.")
