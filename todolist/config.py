from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    log_dir: str | None = None


def _level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"{name}={raw!r} is not a valid logging level.")
    return level


def load_settings() -> Settings:
    return Settings(
        log_level=_level("LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")),
        console_log_level=_level("CONSOLE_LOG_LEVEL", os.getenv("CONSOLE_LOG_LEVEL", "WARNING")),
        log_dir=os.getenv("LOG_DIR", "").strip() or None,
    )


load_env()

SETTINGS = load_settings()
