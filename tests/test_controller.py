# tests/test_controller.py

from __future__ import annotations

import pytest

from todo_client.app.controller import MSG_EMPTY_TITLE, MSG_NO_TASK_ID, MSG_NO_USER, TodoController
from todo_client.core.models import Task, TaskDraft
from todo_client.ui.dom import Page

from .fakes import FakeTodoApi, RecordingNotifier


def _node_for(page: Page, task_id: int):
    nodes = page.task_list.find_by_task_id(task_id)
    assert len(nodes) == 1
    return nodes[0]


@pytest.mark.asyncio
async def test_load_fetches_tasks_then_users_and_renders(controller: TodoController, api: FakeTodoApi, page: Page) -> None:
    await controller.load()

    assert api.call_names() == ["list_tasks", "list_users"]
    assert len(page.task_list) == 4
    assert len(page.user_select.options) == 4
    assert _node_for(page, 5).text == "laboriosam mollitia by Ervin Howell"


@pytest.mark.asyncio
async def test_load_failure_alerts_and_renders_nothing(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    api.fail = {"list_tasks"}
    api.fail_status = 503

    await controller.load()

    assert notifier.messages == ["Error status 503"]
    assert len(page.task_list) == 0
    # Users still load.
    assert len(page.user_select.options) == 4


@pytest.mark.asyncio
async def test_toggle_success_keeps_new_state_and_reenables(controller: TodoController, api: FakeTodoApi, page: Page) -> None:
    await controller.load()
    node = _node_for(page, 1)
    assert node.checkbox.checked is False

    assert await node.checkbox.click() is True

    assert node.checkbox.checked is True
    assert node.checkbox.disabled is False
    assert node.task.completed is True
    assert ("set_task_completed", (1, True)) in api.calls


@pytest.mark.asyncio
async def test_toggle_failure_reverts_and_reenables(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    api.fail = {"set_task_completed"}
    node = _node_for(page, 1)

    await node.checkbox.click()

    assert node.checkbox.checked is False
    assert node.checkbox.disabled is False
    assert node.task.completed is False
    assert notifier.messages == ["Error status 500"]


@pytest.mark.asyncio
async def test_checkbox_is_disabled_while_request_is_in_flight(page: Page, notifier: RecordingNotifier, tasks, users) -> None:
    states: list[bool] = []

    class ObservingApi(FakeTodoApi):
        async def set_task_completed(self, task, completed):
            states.append(_node_for(page, task.id).checkbox.disabled)
            return await super().set_task_completed(task, completed)

    controller = TodoController(ObservingApi(users=users, tasks=tasks), page, notifier)
    await controller.load()
    await _node_for(page, 5).checkbox.click()

    assert states == [True]


@pytest.mark.asyncio
async def test_disabled_checkbox_ignores_clicks(controller: TodoController, api: FakeTodoApi, page: Page) -> None:
    await controller.load()
    node = _node_for(page, 1)
    node.checkbox.disabled = True

    assert await node.checkbox.click() is False
    assert node.checkbox.checked is False
    assert "set_task_completed" not in api.call_names()


@pytest.mark.asyncio
async def test_submit_with_empty_title_makes_no_call(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    page.user_select.select_value("3")

    await page.form.submit()

    assert "create_task" not in api.call_names()
    assert len(page.task_list) == 4
    assert notifier.messages == [MSG_EMPTY_TITLE]
    assert page.user_select.selected_option.value == "3"


@pytest.mark.asyncio
async def test_submit_with_default_user_makes_no_call(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    page.form.title_input.value = "Buy milk"

    await page.form.submit()

    assert "create_task" not in api.call_names()
    assert len(page.task_list) == 4
    assert notifier.messages == [MSG_NO_USER]
    assert page.form.title_input.value == "Buy milk"


@pytest.mark.asyncio
async def test_submit_success_prepends_node_and_clears_input(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    page.form.title_input.value = "Buy milk"
    assert page.user_select.select_value("3")

    await page.form.submit()

    assert ("create_task", TaskDraft(title="Buy milk", user_id=3, completed=False)) in api.calls
    first = page.task_list[0]
    assert first.task.id == 201
    assert first.text == "Buy milk by Clementine Bauch"
    assert first.checkbox.checked is False
    assert page.form.title_input.value == ""
    assert len(page.task_list) == 5
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_submit_failure_changes_nothing(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    api.fail = {"create_task"}
    page.form.title_input.value = "Buy milk"
    page.user_select.select_value("3")

    await page.form.submit()

    assert len(page.task_list) == 4
    assert page.form.title_input.value == "Buy milk"
    assert notifier.messages == ["Error status 500"]


@pytest.mark.asyncio
async def test_created_node_is_wired_for_toggle_and_delete(controller: TodoController, api: FakeTodoApi, page: Page) -> None:
    await controller.load()
    page.form.title_input.value = "Buy milk"
    page.user_select.select_value("3")
    node = await controller.submit()
    assert node is not None

    await node.checkbox.click()
    assert node.checkbox.checked is True

    await node.delete_control.click()
    assert page.task_list.get(node.key) is None
    assert ("delete_task", 201) in api.calls


@pytest.mark.asyncio
async def test_delete_failure_keeps_node(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    await controller.load()
    api.fail = {"delete_task"}
    api.fail_status = 404
    node = _node_for(page, 5)

    await node.delete_control.click()

    assert page.task_list.get(node.key) is node
    assert len(page.task_list) == 4
    assert notifier.messages == ["Error status 404"]


@pytest.mark.asyncio
async def test_delete_removes_only_the_clicked_node(controller: TodoController, api: FakeTodoApi, page: Page) -> None:
    await controller.load()
    # A second node for the same server id (e.g. rendered again).
    twin = controller.renderer.render_task_node(_node_for(page, 5).task, "Ervin Howell")
    original = next(n for n in page.task_list if n.task.id == 5 and n is not twin)

    await twin.delete_control.click()

    assert page.task_list.get(twin.key) is None
    assert page.task_list.get(original.key) is original
    assert len(page.task_list) == 4


@pytest.mark.asyncio
async def test_load_users_failure_alerts_and_leaves_owner_names_empty(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    api.fail = {"list_users"}
    api.fail_status = 502

    await controller.load()

    assert notifier.messages == ["Error status 502"]
    assert len(page.user_select.options) == 1
    assert page.user_select.selected_option.default_selected is True
    assert len(page.task_list) == 4
    assert all(n.user_name is None for n in page.task_list)


@pytest.mark.asyncio
async def test_delete_without_server_id_alerts_and_sends_nothing(
    controller: TodoController, api: FakeTodoApi, page: Page, notifier: RecordingNotifier
) -> None:
    node = controller.renderer.render_task_node(Task(id=None, title="local", completed=False, user_id=1), "A")

    await node.delete_control.click()

    assert "delete_task" not in api.call_names()
    assert page.task_list.get(node.key) is node
    assert notifier.messages == [MSG_NO_TASK_ID]
