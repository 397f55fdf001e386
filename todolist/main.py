from __future__ import annotations

import logging
import sys

from todolist.domain.errors import InputReadError
from todolist.infra.logging import setup_logging
from todolist.infra.repository import TaskStore
from todolist.services.task_service import TaskService
from todolist.ui.console import ConsoleView
from todolist.ui.controller import TaskController

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def run() -> int:
    controller = TaskController(TaskService(TaskStore()), ConsoleView())
    try:
        controller.interaction_loop()
    except InputReadError as exc:
        logger.error("Input read failed: %s", exc)
        print(f"Fatal: {exc}", file=sys.stderr)
        return EXIT_FATAL
    except KeyboardInterrupt:
        logger.info("Interrupted")
        print(file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


def main() -> None:
    setup_logging()
    logger.info("Starting todolist")
    sys.exit(run())


if __name__ == "__main__":
    main()
