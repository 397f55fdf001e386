from __future__ import annotations

import logging

from todolist.domain.enums import MenuOption
from todolist.domain.errors import InputClosedError, TaskNotFoundError
from todolist.services.task_service import TaskService

from .console import ConsoleView
from .parsing import parse_unsigned

logger = logging.getLogger(__name__)

INVALID_OPTION = "Invalid option"


class TaskController:
    def __init__(self, service: TaskService, view: ConsoleView) -> None:
        self.service = service
        self.view = view
        self._handlers = {
            MenuOption.SHOW_ALL: self.show_tasks,
            MenuOption.ADD: self.add_task,
            MenuOption.DELETE: self.delete_task,
            MenuOption.TOGGLE: self.toggle_status,
            MenuOption.CLEAR_ALL: self.delete_tasks,
        }

    def interaction_loop(self) -> None:
        """Run the menu until the user selects exit or input ends.

        Other input failures propagate to the caller.
        """
        try:
            while True:
                self.view.show_menu()
                option = self._read_option()
                if option is MenuOption.EXIT:
                    logger.debug("Exit selected")
                    break
                if option is None:
                    self.view.show_message(INVALID_OPTION)
                    continue
                self._handlers[option]()
        except InputClosedError:
            logger.info("Input closed, leaving the menu loop")

    def show_tasks(self) -> None:
        self.view.display_tasks(self.service.list_tasks())

    def add_task(self) -> None:
        title = self.view.get_user_input("Enter task title:")
        description = self.view.get_user_input("Enter task description:")
        self.service.create_task(title, description)

    def delete_task(self) -> None:
        task_id = parse_unsigned(self.view.get_user_input("Enter task id to delete:"))
        if task_id is None:
            return
        try:
            self.service.delete_task(task_id)
        except TaskNotFoundError as exc:
            self.view.show_message(str(exc))

    def toggle_status(self) -> None:
        self.show_tasks()
        task_id = parse_unsigned(self.view.get_user_input("Enter task id to toggle:"))
        if task_id is None:
            return
        try:
            self.service.toggle_task(task_id)
        except TaskNotFoundError as exc:
            self.view.show_message(str(exc))

    def delete_tasks(self) -> None:
        self.service.clear_tasks()

    def _read_option(self) -> MenuOption | None:
        raw = self.view.get_user_input("Select an option:")
        value = parse_unsigned(raw)
        if value is None:
            logger.debug("Unparseable menu input %r", raw)
            return None
        try:
            return MenuOption(value)
        except ValueError:
            return None
