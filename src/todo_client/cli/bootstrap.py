# src/todo_client/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the REST client, page, renderer and controller into AppState.
"""

from __future__ import annotations

import logging

import httpx

from ..api.client import TodoApiClient, create_http_client
from ..app.controller import TodoController
from ..config import get_settings
from ..core.ports import Notifier
from ..core.state import AppState
from ..ui.dom import Page

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.export_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    notifier: Notifier,
    *,
    settings=None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the HTTP transport) injectable makes the app easy to
    test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    api = TodoApiClient(create_http_client(settings.api_base_url, transport=transport))
    page = Page.create()
    controller = TodoController(api, page, notifier)

    logger.debug("State created (api=%s)", settings.api_base_url)
    return AppState(settings=settings, api=api, page=page, controller=controller)


async def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown: finish pending actions, then close the HTTP client."""
    try:
        await state.drain()
    except Exception:
        logger.exception("Failed while waiting for pending actions.")

    try:
        await state.api.aclose()
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)
