from __future__ import annotations

import sys
from typing import Iterable, TextIO

from todolist.domain.entities import Task
from todolist.domain.errors import InputClosedError, InputReadError

SEPARATOR = "*" * 42

MENU = f"""
{SEPARATOR}
*              TODO LIST                 *
{SEPARATOR}
1. Show all tasks
2. Add a task
3. Delete a task
4. Toggle task status
5. Clear all
0. Exit
{SEPARATOR}
"""

EMPTY_MESSAGE = "Todo list is empty."
HEADER = "Your tasks"


def format_task(task: Task) -> str:
    lines = [f"id: {task.id} | status: {task.status_label} | title: {task.title.strip()}"]
    description = task.description.strip()
    if description:
        lines.append(f" 📝 {description:<40}")
    lines.append(f" 📅 {task.date}")
    lines.append("")
    return "\n".join(lines)


class ConsoleView:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def show_menu(self) -> None:
        self._print(MENU)

    def show_message(self, text: str) -> None:
        self._print(text)

    def display_tasks(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        if not tasks:
            self._print(EMPTY_MESSAGE)
            return

        self._print(HEADER)
        self._print(SEPARATOR)
        for task in tasks:
            self._print(format_task(task))
            self._print(SEPARATOR)

    def get_user_input(self, prompt: str) -> str:
        self._print(prompt)
        try:
            line = self._stdin.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"failed to read input: {exc}") from exc
        if not line:
            raise InputClosedError()
        return line.strip()

    def _print(self, text: str) -> None:
        print(text, file=self._stdout, flush=True)
