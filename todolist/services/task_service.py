from __future__ import annotations

import logging
import time
from typing import Callable

from todolist.domain.entities import Task
from todolist.infra.repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskRepository, clock: Callable[[], float] = time.time) -> None:
        self._repo = repo
        self._clock = clock

    def list_tasks(self) -> tuple[Task, ...]:
        return self._repo.get_all()

    def create_task(self, title: str, description: str) -> Task | None:
        title = title.strip()
        description = description.strip()
        if not title or not description:
            logger.debug("Skipping task creation: empty title or description")
            return None

        task = Task(
            id=self._repo.next_id(),
            title=title,
            description=description,
            date=self._timestamp(),
        )
        self._repo.add(task)
        logger.info("Created task %s", task.id)
        return task

    def delete_task(self, task_id: int) -> None:
        self._repo.delete(task_id)
        logger.info("Deleted task %s", task_id)

    def toggle_task(self, task_id: int) -> Task:
        task = self._repo.toggle(task_id)
        logger.info("Task %s marked done=%s", task_id, task.done)
        return task

    def clear_tasks(self) -> None:
        self._repo.delete_all()
        logger.info("Cleared all tasks")

    def _timestamp(self) -> str:
        return str(int(self._clock()))
