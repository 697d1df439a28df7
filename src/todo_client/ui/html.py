# src/todo_client/ui/html.py

"""HTML snapshot of a Page (same markup the browser version builds)."""

from __future__ import annotations

import logging
import os
from html import escape
from pathlib import Path

from .dom import Page, TaskNode

logger = logging.getLogger(__name__)


def _task_item_html(node: TaskNode) -> str:
    checked = " checked" if node.checkbox.checked else ""
    disabled = " disabled" if node.checkbox.disabled else ""
    todo_id = "" if node.checkbox.data_todo_id is None else str(node.checkbox.data_todo_id)
    dc = node.delete_control
    return (
        f'<li class="todo-item" data-todo-id="{escape(str(node.key))}">'
        f'<input type="checkbox" data-todo-id="{escape(todo_id)}"{checked}{disabled}>'
        f"<div>{escape(node.title)}<em> by </em><strong>{escape(node.user_name or '')}</strong></div>"
        f'<div><svg xmlns="http://www.w3.org/2000/svg" class="close" viewBox="{dc.viewbox}">'
        f'<path d="{dc.path}"></path></svg></div>'
        "</li>"
    )


def render_page_html(page: Page, *, title: str = "todo-client") -> str:
    select = page.user_select
    options = []
    for i, opt in enumerate(select.options):
        selected = " selected" if i == select.selected_index else ""
        options.append(f'<option value="{escape(opt.value)}"{selected}>{escape(opt.label)}</option>')

    items = "\n".join(_task_item_html(node) for node in page.task_list)
    return (
        "<!DOCTYPE html>\n"
        f'<html><head><meta charset="utf-8"><title>{escape(title)}</title></head><body>\n'
        "<form>\n"
        f'<input id="new-todo" type="text" value="{escape(page.form.title_input.value)}">\n'
        f'<select id="user-todo">{"".join(options)}</select>\n'
        "<button type=\"submit\">Add</button>\n"
        "</form>\n"
        f'<ul id="todo-list">\n{items}\n</ul>\n'
        "</body></html>\n"
    )


def export_page_html(page: Page, path: str | Path, *, title: str = "todo-client") -> Path:
    """Write the snapshot atomically (tmp file + replace)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(render_page_html(page, title=title), "utf-8")
    try:
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    logger.info("Exported page snapshot (%d tasks) to %s", len(page.task_list), path)
    return path
