"""Drawing the game state and prompts on a terminal."""

from __future__ import annotations

import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from mazegame.controller import FirstAidKit, Mine, Teleport
from mazegame.field import Field
from mazegame.player import Player

_EVENT_SYMBOLS = {FirstAidKit: "+ ", Mine: "@ ", Teleport: "0 "}


def _symbol(player: Player, field: Field, x: int, y: int) -> str:
    if player.position == (x, y):
        return "P "
    if field.entrance == (x, y):
        return "[]"
    if field.exit == (x, y):
        return "{}"
    cell = field.cell(x, y)
    if cell.event is not None and type(cell.event) in _EVENT_SYMBOLS:
        return _EVENT_SYMBOLS[type(cell.event)]
    if not cell.passable:
        return "# "
    return ". "


def format_field(player: Player, field: Field) -> str:
    """Draw the field with event kinds shown, one row per line."""
    return "".join(
        "".join(_symbol(player, field, x, y) for x in range(field.width)) + "\n"
        for y in range(field.length)
    )


def format_player(player: Player) -> str:
    """Describe the player's stats and position."""
    return (
        f"Health = {player.health}\nPoints = {player.points}\n"
        f"Level = {player.level}\nX, Y = {player.x}, {player.y}\n\n"
    )


class Renderer(ABC):
    """Everything the game needs to show to the user."""

    @abstractmethod
    def print_playing_field(self, player: Player, field: Field) -> None: ...

    @abstractmethod
    def print_player(self, player: Player) -> None: ...

    @abstractmethod
    def print_start(self) -> None: ...

    @abstractmethod
    def print_logger(self) -> None: ...

    @abstractmethod
    def print_choose_logger(self) -> None: ...

    @abstractmethod
    def print_level(self) -> None: ...

    @abstractmethod
    def print_win(self) -> None: ...

    @abstractmethod
    def print_lose(self) -> None: ...

    @abstractmethod
    def print_game(self) -> None: ...

    @abstractmethod
    def print_new_game(self) -> None: ...

    @abstractmethod
    def print_the_end(self) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...


class TerminalRenderer(Renderer):
    """Renders to a text stream, standard output by default."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def _write(self, text: str) -> None:
        out = self.stream or sys.stdout
        out.write(text)
        out.flush()

    def _line(self, text: str) -> None:
        self._write(text + "\n")

    def print_playing_field(self, player: Player, field: Field) -> None:
        self._write(format_field(player, field))

    def print_player(self, player: Player) -> None:
        self._write(format_player(player))

    def print_start(self) -> None:
        self._line("Hello and Welcome in my Game!")

    def print_logger(self) -> None:
        self._line("DO YOU NEED A LOGGER? (Y - YES, N - NO): ")

    def print_choose_logger(self) -> None:
        self._line("WHAT KIND OF LOGGER YOU WANT (1 - file, 2 - terminal, 3 - both): ")

    def print_level(self) -> None:
        self._line("Choose a level of map (1 or 2):")

    def print_win(self) -> None:
        self._line("Congratulations, you have reached the finish line!")

    def print_lose(self) -> None:
        self._line("You're dead!")

    def print_game(self) -> None:
        """Nothing is shown while playing beyond the field itself."""

    def print_new_game(self) -> None:
        self._line("Do you want to restart the game ?(y - YES, n - NO)")

    def print_the_end(self) -> None:
        self._line("Thanks! Goodbye.")

    def clear(self) -> None:
        """Clear the terminal screen."""
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)