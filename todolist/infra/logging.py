from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from todolist.config import SETTINGS, Settings


def setup_logging(settings: Settings = SETTINGS) -> None:
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr keeps log lines out of the menu on stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(settings.console_log_level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if settings.log_dir:
        log_dir = Path.cwd() / settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "todolist.log", maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=settings.log_level,
        handlers=handlers,
        force=True,
    )
