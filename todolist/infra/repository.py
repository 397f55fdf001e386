from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Protocol

from todolist.domain.entities import Task
from todolist.domain.errors import TaskNotFoundError

from .id_generator import IdGenerator

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    def next_id(self) -> int: ...

    def add(self, task: Task) -> None: ...

    def get_all(self) -> tuple[Task, ...]: ...

    def delete_all(self) -> None: ...

    def delete(self, task_id: int) -> None: ...

    def toggle(self, task_id: int) -> Task: ...


class TaskStore:
    """In-memory task collection kept in insertion order."""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._ids = id_generator or IdGenerator()
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def next_id(self) -> int:
        return self._ids.next()

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get_all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def delete_all(self) -> None:
        self._tasks.clear()

    def delete(self, task_id: int) -> None:
        index = self._index_of(task_id)
        del self._tasks[index]

    def toggle(self, task_id: int) -> Task:
        index = self._index_of(task_id)
        task = self._tasks[index]
        updated = replace(task, done=not task.done)
        self._tasks[index] = updated
        return updated

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        logger.debug("Lookup miss for task id %s", task_id)
        raise TaskNotFoundError(task_id)
