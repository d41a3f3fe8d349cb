"""Log messages describing game events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mazegame.field import Field
from mazegame.keymap import Action, KeyTranslator
from mazegame.player import Player


class Message(ABC):
    """A piece of text that describes what happened, computed on demand."""

    @abstractmethod
    def text(self) -> str:
        """Return the message text."""


class WinMessage(Message):
    def __init__(self, player: Player) -> None:
        self.player = player

    def text(self) -> str:
        return f"Player WIN! Health = {self.player.health}, Points = {self.player.points}"


class LoseMessage(Message):
    def __init__(self, player: Player) -> None:
        self.player = player

    def text(self) -> str:
        return f"Player LOSE! X, Y = {self.player.x}, {self.player.y}"


class NewGameMessage(Message):
    def __init__(self, field: Field) -> None:
        self.field = field

    def text(self) -> str:
        x, y = self.field.entrance
        return (
            "A new game is loaded! Size field (length, width) = "
            f"{self.field.length}, {self.field.width}"
            f"; Start position (x, y) = {x}, {y}"
        )


_COMMAND_NAMES = {
    Action.MOVE_UP: "UP",
    Action.MOVE_DOWN: "DOWN",
    Action.MOVE_LEFT: "LEFT",
    Action.MOVE_RIGHT: "RIGHT",
    Action.QUIT: "QUIT",
    Action.YES: "YES",
    Action.NO: "NO",
    Action.ONE: "1",
    Action.TWO: "2",
    Action.THREE: "3",
}


class KeyPushMessage(Message):
    def __init__(self, translator: KeyTranslator) -> None:
        self.translator = translator

    def text(self) -> str:
        command = _COMMAND_NAMES.get(self.translator.last_action, "")
        return (
            f"A key has been entered = {self.translator.last_key}"
            f" after that, the command worked = {command}"
        )


class KeyIgnoredMessage(Message):
    def __init__(self, translator: KeyTranslator) -> None:
        self.translator = translator

    def text(self) -> str:
        return f"A key has been entered = {self.translator.last_key} but nothing worked."