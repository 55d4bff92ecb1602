"""Core systems for the table UI."""

from pygame_ui.core.table_director import TableDirector
from pygame_ui.core.input_controller import InputController

__all__ = [
    "TableDirector",
    "InputController",
]
