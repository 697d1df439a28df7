# src/todo_client/app/controller.py

from __future__ import annotations

"""
Event orchestration.

Connects page events (load, form submit, checkbox click, delete click) to the
REST client and the renderer. The page only changes after the server confirms:
- create: prepend the new node once POST succeeds
- delete: remove the node once DELETE succeeds
- toggle: the checkbox flips immediately, and is reverted if PATCH fails

Known limitation: two overlapping toggles on the same task are not ordered;
whichever response resolves last decides the visible state.
"""

import logging
from dataclasses import replace

from ..core.models import Task, TaskDraft, User
from ..core.ports import Notifier, TodoApi
from ..ui.dom import Checkbox, Element, Page, TaskNode
from ..ui.renderer import Renderer, resolve_user_name

logger = logging.getLogger(__name__)

MSG_EMPTY_TITLE = "Enter a task"
MSG_NO_USER = "Select a user"
MSG_NO_TASK_ID = "This task has no server id and cannot be deleted"


class TodoController:
    def __init__(self, api: TodoApi, page: Page, notifier: Notifier) -> None:
        self.api = api
        self.page = page
        self.notifier = notifier
        self.renderer = Renderer(page, on_node_created=self._bind_node)

        # Captured at load time for the whole session.
        self.users: list[User] = []
        self.tasks: list[Task] = []

        self._form_bound = False

    # -------------------- load --------------------

    async def load(self) -> None:
        """Fetch tasks, then users (sequentially), render them and bind the form."""
        tasks_res = await self.api.list_tasks()
        if not tasks_res.ok:
            self.notifier.alert(str(tasks_res.error))
        users_res = await self.api.list_users()
        if not users_res.ok:
            self.notifier.alert(str(users_res.error))

        self.tasks = list(tasks_res.value or [])
        self.users = list(users_res.value or [])

        self.renderer.render_task_list(self.tasks, self.users)
        self.renderer.render_user_options(self.users)

        if not self._form_bound:
            self.page.form.add_event_listener("submit", self._on_submit)
            self._form_bound = True

        logger.info("Loaded %d tasks and %d users.", len(self.tasks), len(self.users))

    # -------------------- listeners --------------------

    def _bind_node(self, node: TaskNode) -> None:
        async def on_toggle(_el: Element) -> None:
            await self.toggle_completed(node)

        async def on_delete(_el: Element) -> None:
            await self.delete(node)

        node.checkbox.add_event_listener("click", on_toggle)
        node.delete_control.add_event_listener("click", on_delete)

    async def _on_submit(self, _el: Element) -> None:
        await self.submit()

    # -------------------- actions --------------------

    async def submit(self) -> TaskNode | None:
        """Validate the form, POST, then prepend the created task and clear the input."""
        form = self.page.form
        title = form.title_input.value
        if not title:
            self.notifier.alert(MSG_EMPTY_TITLE)
            return None

        option = form.user_select.selected_option
        if option.default_selected:
            self.notifier.alert(MSG_NO_USER)
            return None

        try:
            user_id = int(option.value)
        except ValueError:
            logger.warning("Selected option has a non-numeric value: %r", option.value)
            self.notifier.alert(MSG_NO_USER)
            return None

        res = await self.api.create_task(TaskDraft(title=title, user_id=user_id, completed=False))
        if not res.ok or res.value is None:
            self.notifier.alert(str(res.error))
            return None

        created = res.value
        node = self.renderer.render_task_node(created, resolve_user_name(self.users, created.user_id), prepend=True)
        form.title_input.value = ""
        logger.info("Created task id=%s for user id=%s", created.id, created.user_id)
        return node

    async def toggle_completed(self, node: TaskNode) -> bool:
        """
        Called after the checkbox already flipped.
        Disable -> PATCH -> re-enable; on failure revert to the pre-click state.
        """
        checkbox: Checkbox = node.checkbox
        checkbox.disabled = True
        wanted = checkbox.checked

        res = await self.api.set_task_completed(node.task, wanted)
        if not res.ok:
            self.notifier.alert(str(res.error))
            checkbox.disabled = False
            checkbox.checked = not checkbox.checked
            logger.info("Reverted toggle of task id=%s", node.task.id)
            return False

        checkbox.disabled = False
        node.task = replace(node.task, completed=wanted)
        logger.debug("Task id=%s completed=%s", node.task.id, wanted)
        return True

    async def delete(self, node: TaskNode) -> bool:
        """DELETE, then remove exactly this node by its key."""
        task_id = node.task.id
        if task_id is None:
            logger.warning("Cannot delete a task without id (key=%s)", node.key)
            self.notifier.alert(MSG_NO_TASK_ID)
            return False

        res = await self.api.delete_task(task_id)
        if not res.ok:
            self.notifier.alert(str(res.error))
            return False

        removed = self.page.task_list.remove(node.key)
        logger.info("Deleted task id=%s (node removed=%s)", task_id, removed)
        return removed
