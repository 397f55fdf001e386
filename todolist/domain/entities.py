from __future__ import annotations

from dataclasses import dataclass

STATUS_DONE_LABEL = "✓ Done"
STATUS_NOT_DONE_LABEL = "✗ Not done"


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: str
    date: str
    done: bool = False

    @property
    def status_label(self) -> str:
        return STATUS_DONE_LABEL if self.done else STATUS_NOT_DONE_LABEL
