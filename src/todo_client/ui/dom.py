# src/todo_client/ui/dom.py

"""
In-memory document model of the to-do page.

It mirrors the handful of browser elements the app needs (checkbox, text input,
select, form, list) with just enough behavior: state, a disabled flag and
event listeners. Connectors display it; the renderer and controller mutate it.
"""

from __future__ import annotations

import inspect
import uuid
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field

from ..core.models import Task

Listener = Callable[["Element"], Awaitable[None] | None]

DEFAULT_USER_LABEL = "Select user"


class Element:
    """Base element: a named-event listener registry."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    async def dispatch(self, event: str) -> None:
        for listener in list(self._listeners.get(event, ())):
            res = listener(self)
            if inspect.isawaitable(res):
                await res


class Checkbox(Element):
    def __init__(self, *, checked: bool = False, data_todo_id: int | None = None) -> None:
        super().__init__()
        self.checked = checked
        self.disabled = False
        self.data_todo_id = data_todo_id

    async def click(self) -> bool:
        """
        Toggle and fire "click" listeners, like a user click.
        A disabled checkbox ignores the click; returns False in that case.
        """
        if self.disabled:
            return False
        self.checked = not self.checked
        await self.dispatch("click")
        return True


# Material "close" icon.
XMARK_VIEWBOX = "0 -960 960 960"
XMARK_PATH = (
    "m249-207-42-42 231-231-231-231 42-42 231 231 231-231 42 42-231 231 231 231-42 42-231-231-231 231Z"
)


class DeleteControl(Element):
    """The X mark next to each task."""

    glyph = "✕"
    viewbox = XMARK_VIEWBOX
    path = XMARK_PATH

    async def click(self) -> None:
        await self.dispatch("click")


@dataclass(frozen=True, slots=True)
class NodeKey:
    """Server task id plus a random token; unique per rendered node."""

    task_id: int | None
    token: str

    @classmethod
    def new(cls, task_id: int | None) -> NodeKey:
        return cls(task_id=task_id, token=str(uuid.uuid4()))

    def __str__(self) -> str:
        return f"{self.task_id}-{self.token}"


@dataclass(eq=False, slots=True)
class TaskNode:
    """One list item: checkbox, "<title> by <user>", delete control."""

    key: NodeKey
    task: Task
    user_name: str | None
    checkbox: Checkbox
    delete_control: DeleteControl = field(default_factory=DeleteControl)

    @property
    def title(self) -> str:
        return self.task.title or ""

    @property
    def text(self) -> str:
        return f"{self.title} by {self.user_name or ''}".rstrip()


class TaskListView:
    """Ordered task list with a key -> node index."""

    def __init__(self) -> None:
        self._order: list[TaskNode] = []
        self._by_key: dict[NodeKey, TaskNode] = {}

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[TaskNode]:
        return iter(list(self._order))

    def __getitem__(self, index: int) -> TaskNode:
        return self._order[index]

    def append(self, node: TaskNode) -> None:
        self._order.append(node)
        self._by_key[node.key] = node

    def prepend(self, node: TaskNode) -> None:
        self._order.insert(0, node)
        self._by_key[node.key] = node

    def get(self, key: NodeKey) -> TaskNode | None:
        return self._by_key.get(key)

    def remove(self, key: NodeKey) -> bool:
        node = self._by_key.pop(key, None)
        if node is None:
            return False
        self._order.remove(node)
        return True

    def find_by_task_id(self, task_id: int) -> list[TaskNode]:
        return [n for n in self._order if n.task.id == task_id]


@dataclass(frozen=True, slots=True)
class UserOption:
    value: str
    label: str
    default_selected: bool = False


class UserSelect(Element):
    """Selection control; option 0 is the pre-existing "unselected" default."""

    def __init__(self, default_label: str = DEFAULT_USER_LABEL) -> None:
        super().__init__()
        self.options: list[UserOption] = [UserOption(value="", label=default_label, default_selected=True)]
        self.selected_index = 0

    def add_option(self, option: UserOption) -> None:
        self.options.append(option)

    @property
    def selected_option(self) -> UserOption:
        return self.options[self.selected_index]

    def select_value(self, value: str) -> bool:
        for i, opt in enumerate(self.options):
            if opt.value == value:
                self.selected_index = i
                return True
        return False

    def reset(self) -> None:
        self.selected_index = 0


class TextInput(Element):
    def __init__(self, value: str = "") -> None:
        super().__init__()
        self.value = value


class NewTaskForm(Element):
    """Form with a title input and the user select; fires "submit"."""

    def __init__(self, title_input: TextInput, user_select: UserSelect) -> None:
        super().__init__()
        self.title_input = title_input
        self.user_select = user_select

    async def submit(self) -> None:
        await self.dispatch("submit")


@dataclass(slots=True)
class Page:
    """Render targets, passed explicitly to the renderer and controller."""

    task_list: TaskListView
    user_select: UserSelect
    form: NewTaskForm

    @classmethod
    def create(cls, *, default_user_label: str = DEFAULT_USER_LABEL) -> Page:
        select = UserSelect(default_label=default_user_label)
        form = NewTaskForm(TextInput(), select)
        return cls(task_list=TaskListView(), user_select=select, form=form)
