# src/todo_client/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import cast

from ..core.state import AppState
from ..ui.dom import Page, TaskNode
from ..ui.html import export_page_html

CommandEmitter = Callable[[str], None]
CommandResult = str | Awaitable[str]
CommandHandler2 = Callable[[AppState, list[str]], CommandResult]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], CommandResult]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /list, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            res = cast(CommandHandler3, handler)(state, args, emit)
        else:
            res = cast(CommandHandler2, handler)(state, args)

        if inspect.isawaitable(res):
            return await res
        return res

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_line(index: int, node: TaskNode) -> str:
    mark = "x" if node.checkbox.checked else " "
    busy = " (saving...)" if node.checkbox.disabled else ""
    return f"{index:>3}. [{mark}] {node.text}{busy}  {node.delete_control.glyph}"


def format_task_list(page: Page) -> str:
    if not len(page.task_list):
        return "No tasks."
    return "\n".join(format_task_line(i, node) for i, node in enumerate(page.task_list, start=1))


def format_user_options(page: Page) -> str:
    select = page.user_select
    lines = []
    for i, opt in enumerate(select.options):
        pointer = ">" if i == select.selected_index else " "
        value = opt.value or "-"
        lines.append(f" {pointer} {value:>3}  {opt.label}")
    return "\n".join(lines)


def _node_at(state: AppState, raw: str) -> TaskNode | None:
    try:
        index = int(raw)
    except ValueError:
        return None
    if index < 1 or index > len(state.page.task_list):
        return None
    return state.page.task_list[index - 1]


def _select_user(state: AppState, raw: str) -> bool:
    select = state.page.user_select
    if raw.lower() in ("0", "none", "-"):
        select.reset()
        return True
    return select.select_value(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    form = state.page.form
    return (
        "Status:\n"
        f"  API: {state.api.base_url}\n"
        f"  Tasks shown: {len(state.page.task_list)}\n"
        f"  Users loaded: {len(state.controller.users)}\n"
        f"  Form: title={form.title_input.value!r} user={form.user_select.selected_option.label!r}\n"
        f"  Pending actions: {len(state.pending)}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state.page)


def cmd_users(state: AppState, args: list[str]) -> str:
    return format_user_options(state.page)


def cmd_title(state: AppState, args: list[str]) -> str:
    state.page.form.title_input.value = " ".join(args)
    return f"Title set to {state.page.form.title_input.value!r}."


def cmd_select(state: AppState, args: list[str]) -> str:
    """
    /select <user id>   -> pick a user
    /select 0 | none    -> back to the default (unselected) option
    """
    if not args:
        return "Usage: /select <user id> (see /users)."
    if not _select_user(state, args[0]):
        return f"No user with id {args[0]}. See /users."
    return f"Selected: {state.page.user_select.selected_option.label}."


def cmd_submit(state: AppState, args: list[str]) -> str:
    state.schedule(state.page.form.submit())
    return "Submitting..."


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <user id> <title...>: fill the form and submit it."""
    if len(args) < 2:
        return "Usage: /add <user id> <title>."
    if not _select_user(state, args[0]):
        return f"No user with id {args[0]}. See /users."
    state.page.form.title_input.value = " ".join(args[1:])
    state.schedule(state.page.form.submit())
    return "Submitting..."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    node = _node_at(state, args[0]) if args else None
    if node is None:
        return "Usage: /toggle <n> (n from /list)."
    if node.checkbox.disabled:
        return f"Task {args[0]} is still saving."
    state.schedule(node.checkbox.click())
    return f"Toggling: {node.title}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    node = _node_at(state, args[0]) if args else None
    if node is None:
        return "Usage: /delete <n> (n from /list)."
    state.schedule(node.delete_control.click())
    return f"Deleting: {node.title}"


def cmd_export(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    default = getattr(state.settings, "export_path", Path("page.html"))
    target = Path(" ".join(args)).expanduser() if args else Path(default)
    if emit:
        emit(f"Writing {target}...")
    app_name = str(getattr(state.settings, "app_name", "todo-client"))
    try:
        path = export_page_html(state.page, target, title=app_name)
    except OSError as e:
        logger.warning("Export to %s failed: %s", target, e)
        return f"Export failed: {e}"
    return f"Page exported to {path}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show API URL, counts and pending actions.")
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("users", cmd_users, help_text="Show the user options.")
registry.register("title", cmd_title, help_text="Set the new task title: /title <text>.")
registry.register("select", cmd_select, help_text="Select the owner: /select <user id> | /select none.")
registry.register("submit", cmd_submit, help_text="Submit the new task form.")
registry.register("add", cmd_add, help_text="Create a task: /add <user id> <title>.")
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <n>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["rm"])
registry.register("export", cmd_export, help_text="Write an HTML snapshot: /export [path].")
