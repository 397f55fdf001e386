from __future__ import annotations

from enum import IntEnum


class MenuOption(IntEnum):
    EXIT = 0
    SHOW_ALL = 1
    ADD = 2
    DELETE = 3
    TOGGLE = 4
    CLEAR_ALL = 5
