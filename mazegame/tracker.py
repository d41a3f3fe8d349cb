"""Routes game states to the renderer and the active loggers."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from mazegame.field import Field
from mazegame.keymap import KeyTranslator
from mazegame.loggers import Logger
from mazegame.messages import (
    KeyIgnoredMessage,
    KeyPushMessage,
    LoseMessage,
    Message,
    NewGameMessage,
    WinMessage,
)
from mazegame.player import Player
from mazegame.render import Renderer


class GameState(Enum):
    START = auto()
    LEVEL = auto()
    PLAY = auto()
    WIN = auto()
    LOSE = auto()
    NEW = auto()
    END = auto()
    GAME = auto()
    KEY = auto()
    KEY_COMMAND = auto()
    LOGGER = auto()
    CHOOSE_LOGGER = auto()


class Tracker:
    """Shows and logs whatever each game state calls for."""

    def __init__(
        self,
        renderer: Renderer,
        translator: KeyTranslator,
        player: Player,
        field: Field,
    ) -> None:
        self.renderer = renderer
        self.player = player
        self.field = field
        self.win_message = WinMessage(player)
        self.lose_message = LoseMessage(player)
        self.new_game_message = NewGameMessage(field)
        self.key_push_message = KeyPushMessage(translator)
        self.key_ignored_message = KeyIgnoredMessage(translator)

    @staticmethod
    def _log(loggers: Iterable[Logger], message: Message) -> None:
        for logger in loggers:
            logger.log(message)

    def handle(self, state: GameState, loggers: Iterable[Logger]) -> None:
        """Render and log the given state."""
        loggers = list(loggers)
        render = self.renderer
        if state is GameState.START:
            render.print_start()
        elif state is GameState.LOGGER:
            render.print_logger()
        elif state is GameState.CHOOSE_LOGGER:
            render.print_choose_logger()
        elif state is GameState.LEVEL:
            render.print_level()
        elif state is GameState.GAME:
            self._log(loggers, self.new_game_message)
        elif state is GameState.PLAY:
            render.print_player(self.player)
            render.print_playing_field(self.player, self.field)
            render.print_game()
        elif state is GameState.LOSE:
            render.print_lose()
            self._log(loggers, self.lose_message)
        elif state is GameState.WIN:
            render.print_win()
            self._log(loggers, self.win_message)
        elif state is GameState.NEW:
            render.print_new_game()
        elif state is GameState.END:
            render.print_the_end()
        elif state is GameState.KEY:
            render.clear()
            self._log(loggers, self.key_ignored_message)
        elif state is GameState.KEY_COMMAND:
            render.clear()
            self._log(loggers, self.key_push_message)
        else:
            raise ValueError(f"unknown game state: {state!r}")