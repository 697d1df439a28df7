# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_client.app.controller import TodoController
from todo_client.core.models import Task, User
from todo_client.ui.dom import Page

from .fakes import FakeTodoApi, RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=False,
        api_base_url="https://api.test",
        data_dir=tmp_path / "data",
        export_path=tmp_path / "data" / "page.html",
    )


@pytest.fixture()
def users() -> list[User]:
    return [
        User(id=1, name="Leanne Graham"),
        User(id=2, name="Ervin Howell"),
        User(id=3, name="Clementine Bauch"),
    ]


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        Task(id=1, title="delectus aut autem", completed=False, user_id=1),
        Task(id=5, title="laboriosam mollitia", completed=False, user_id=2),
        Task(id=7, title="illo expedita", completed=True, user_id=3),
        Task(id=9, title="orphan task", completed=False, user_id=99),
    ]


@pytest.fixture()
def api(users: list[User], tasks: list[Task]) -> FakeTodoApi:
    return FakeTodoApi(users=users, tasks=tasks)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def page() -> Page:
    return Page.create()


@pytest.fixture()
def controller(api: FakeTodoApi, page: Page, notifier: RecordingNotifier) -> TodoController:
    return TodoController(api, page, notifier)
