"""Playing field made of cells, some of which hold events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from mazegame.player import Player

if TYPE_CHECKING:
    from mazegame.controller import Controller


class Event(ABC):
    """Something that happens when the player steps on a cell."""

    @abstractmethod
    def start(self, controller: "Controller") -> None:
        """Apply the event's effect through the controller."""

    def create(self) -> "Event":
        """Return a fresh event of the same kind."""
        return type(self)()


@dataclass
class Cell:
    """One square of the field: passable or a wall, with an optional event."""

    passable: bool = True
    event: Optional[Event] = None

    def has_event(self) -> bool:
        return self.event is not None

    def launch(self, controller: "Controller") -> None:
        """Trigger the cell's event once and remove it."""
        event = self.event
        if event is None:
            return
        event.start(controller)
        self.event = None

    def clear_event(self) -> None:
        self.event = None

    def copy(self) -> "Cell":
        return Cell(self.passable, self.event.create() if self.event else None)


class Field:
    """A width x length grid of cells addressed as (x, y)."""

    MIN_WIDTH = 5
    MIN_LENGTH = 5

    def __init__(self, width: int = MIN_WIDTH, length: int = MIN_LENGTH) -> None:
        if width < self.MIN_WIDTH or length < self.MIN_LENGTH:
            raise ValueError(f"Invalid field size: {width}x{length}")
        self._width = width
        self._length = length
        self._cells = [[Cell() for _ in range(length)] for _ in range(width)]
        self._entrance = (0, 0)
        self._exit = (0, 0)
        self.set_entrance(0, 0)
        self.set_exit(0, length - 1)

    @property
    def width(self) -> int:
        return self._width

    @property
    def length(self) -> int:
        return self._length

    @property
    def entrance(self) -> tuple[int, int]:
        return self._entrance

    @property
    def exit(self) -> tuple[int, int]:
        return self._exit

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the field."""
        return 0 <= x < self._width and 0 <= y < self._length

    def cell(self, x: int, y: int) -> Cell:
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the field")
        return self._cells[x][y]

    def _usable(self, x: int, y: int) -> bool:
        return self.contains(x, y) and self._cells[x][y].passable

    def set_entrance(self, x: int, y: int) -> None:
        if not self._usable(x, y):
            raise ValueError("Invalid entrance coordinates!")
        self._entrance = (x, y)

    def set_exit(self, x: int, y: int) -> None:
        if not self._usable(x, y):
            raise ValueError("Invalid exit coordinates!")
        self._exit = (x, y)

    def copy(self) -> "Field":
        """Return an independent copy with fresh events in the same places."""
        clone = Field.__new__(Field)
        clone.assign(self)
        return clone

    def assign(self, other: "Field") -> None:
        """Replace this field's contents with a copy of another field."""
        if other is self:
            return
        self._width = other._width
        self._length = other._length
        self._entrance = other._entrance
        self._exit = other._exit
        self._cells = [[cell.copy() for cell in column] for column in other._cells]

    def _symbol(self, x: int, y: int, player: Player) -> str:
        if player.position == (x, y):
            return "P "
        if self._entrance == (x, y):
            return "[]"
        if self._exit == (x, y):
            return "{}"
        cell = self._cells[x][y]
        if cell.has_event():
            return "@ "
        if not cell.passable:
            return "# "
        return ". "

    def render_plain(self, player: Player) -> str:
        """Draw the field as text, one row per line."""
        return "".join(
            "".join(self._symbol(x, y, player) for x in range(self._width)) + "\n"
            for y in range(self._length)
        )