from __future__ import annotations

import io

import pytest

from todolist.domain.entities import Task
from todolist.domain.errors import InputClosedError, InputReadError
from todolist.ui.console import SEPARATOR, ConsoleView


class BrokenStream(io.StringIO):
    def readline(self, size: int | None = -1) -> str:  # type: ignore[override]
        raise OSError("stream broken")


def _view(stdin: str = "") -> tuple[ConsoleView, io.StringIO]:
    out = io.StringIO()
    return ConsoleView(stdin=io.StringIO(stdin), stdout=out), out


def test_show_menu_lists_all_options() -> None:
    view, out = _view()

    view.show_menu()

    text = out.getvalue()
    assert "TODO LIST" in text
    for line in ["1. Show all tasks", "2. Add a task", "3. Delete a task",
                 "4. Toggle task status", "5. Clear all", "0. Exit"]:
        assert line in text


def test_display_empty_list() -> None:
    view, out = _view()

    view.display_tasks([])

    assert out.getvalue() == "Todo list is empty.\n"


def test_display_tasks_renders_each_block() -> None:
    view, out = _view()
    tasks = [
        Task(id=1, title=" Buy milk ", description=" 2% ", date="1700000000"),
        Task(id=2, title="Call", description="   ", date="1700000001", done=True),
    ]

    view.display_tasks(tasks)

    assert out.getvalue().splitlines() == [
        "Your tasks",
        SEPARATOR,
        "id: 1 | status: ✗ Not done | title: Buy milk",
        " 📝 " + "2%".ljust(40),
        " 📅 1700000000",
        "",
        SEPARATOR,
        "id: 2 | status: ✓ Done | title: Call",
        " 📅 1700000001",
        "",
        SEPARATOR,
    ]


def test_get_user_input_prints_prompt_and_strips() -> None:
    view, out = _view("  hello world \nnext\n")

    assert view.get_user_input("Prompt:") == "hello world"
    assert view.get_user_input("Again:") == "next"
    assert out.getvalue() == "Prompt:\nAgain:\n"


def test_get_user_input_blank_line_is_empty_string() -> None:
    view, _ = _view("\n")

    assert view.get_user_input("Prompt:") == ""


def test_get_user_input_at_eof_raises() -> None:
    view, _ = _view("")

    with pytest.raises(InputClosedError):
        view.get_user_input("Prompt:")


def test_get_user_input_wraps_stream_errors() -> None:
    view = ConsoleView(stdin=BrokenStream(), stdout=io.StringIO())

    with pytest.raises(InputReadError) as excinfo:
        view.get_user_input("Prompt:")

    assert isinstance(excinfo.value.__cause__, OSError)
