# src/todo_client/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the page and runs the console
connector until the user quits. Pending actions finish before exit.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def run_app(settings) -> None:
    state = create_initial_state(ConsoleNotifier(), settings=settings)
    try:
        if settings.console_enabled:
            await run_console_loop(state)
        else:
            # Headless: load once and log the result.
            await state.controller.load()
            logger.info("Console disabled. Loaded %d tasks; nothing else to do.", len(state.page.task_list))
    finally:
        await shutdown_state(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (api=%s)...", settings.app_name, settings.api_base_url)

    try:
        asyncio.run(run_app(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
