from __future__ import annotations

import threading


class IdGenerator:
    """Monotonic source of task ids. Values are never reused."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value
