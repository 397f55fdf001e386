from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by the todolist package."""


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found.")
        self.task_id = task_id


class InputReadError(TodoError):
    """Standard input could not be read; the session cannot continue."""


class InputClosedError(InputReadError):
    def __init__(self) -> None:
        super().__init__("input stream closed")
