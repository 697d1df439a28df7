# src/todo_client/ui/renderer.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..core.models import Task, User
from .dom import Checkbox, DeleteControl, NodeKey, Page, TaskNode, UserOption

logger = logging.getLogger(__name__)

NodeHook = Callable[[TaskNode], None]


def resolve_user_name(users: Sequence[User], user_id: int | None) -> str | None:
    """Name of the first user whose id matches, or None."""
    for user in users:
        if user.id == user_id:
            return user.name
    return None


class Renderer:
    """
    Builds task nodes and user options into an explicit Page.

    `on_node_created` is called for every new node (the controller uses it to
    attach checkbox/delete listeners).
    """

    def __init__(self, page: Page, on_node_created: NodeHook | None = None) -> None:
        self.page = page
        self.on_node_created = on_node_created

    def render_task_node(self, task: Task, user_name: str | None, prepend: bool = False) -> TaskNode:
        node = TaskNode(
            key=NodeKey.new(task.id),
            task=task,
            user_name=user_name,
            checkbox=Checkbox(checked=bool(task.completed), data_todo_id=task.id),
            delete_control=DeleteControl(),
        )

        if self.on_node_created is not None:
            self.on_node_created(node)

        if prepend:
            self.page.task_list.prepend(node)
        else:
            self.page.task_list.append(node)
        return node

    def render_task_list(self, tasks: Iterable[Task] | None, users: Sequence[User] | None) -> list[TaskNode]:
        users = list(users or [])
        nodes = [self.render_task_node(task, resolve_user_name(users, task.user_id)) for task in tasks or []]
        logger.debug("Rendered %d task nodes.", len(nodes))
        return nodes

    def render_user_options(self, users: Iterable[User] | None) -> None:
        select = self.page.user_select
        for user in users or []:
            select.add_option(UserOption(value=str(user.id), label=user.name or ""))
        logger.debug("User select now has %d options.", len(select.options))
