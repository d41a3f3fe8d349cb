"""The game loop: logger choice, level choice, play and restart."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from mazegame.controller import Controller, Direction
from mazegame.field import Field
from mazegame.keymap import (
    Action,
    InputSource,
    KeyboardInput,
    KeyMapError,
    KeyTranslator,
    load_control_keys,
)
from mazegame.levels import create_level
from mazegame.loggers import FileLogger, Logger, TerminalLogger
from mazegame.player import Player
from mazegame.render import Renderer, TerminalRenderer
from mazegame.tracker import GameState, Tracker

DEFAULT_KEYS_PATH = "control_keys"

_MOVES = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

_LEVEL_CHOICES = {Action.ONE: 1, Action.TWO: 2}


class Game:
    """Runs rounds of the game until the user declines to restart."""

    def __init__(
        self,
        source: InputSource,
        renderer: Renderer,
        keys_path: Union[str, Path] = DEFAULT_KEYS_PATH,
    ) -> None:
        self.source = source
        self.renderer = renderer
        self.keys_path = keys_path
        self.field = Field()
        self.player = Player()
        self.loggers: list[Logger] = []
        self._ask_logger = True

    def begin(self) -> None:
        """Play rounds until the user chooses not to restart."""
        while True:
            bindings = load_control_keys(self.keys_path)
            self.player = Player()
            translator = KeyTranslator(self.source, bindings)
            tracker = Tracker(self.renderer, translator, self.player, self.field)
            tracker.handle(GameState.START, self.loggers)
            if self._ask_logger:
                self._choose_logger(translator, tracker)
            self._choose_level(translator, tracker)
            self._play(translator, tracker)
            if not self._ask_restart(translator, tracker):
                return

    def _choose_logger(self, translator: KeyTranslator, tracker: Tracker) -> None:
        tracker.handle(GameState.LOGGER, self.loggers)
        self._ask_logger = False
        while True:
            action = translator.get_action()
            if action is Action.YES:
                self._pick_loggers(translator, tracker)
                return
            if action is Action.NO:
                self._close_loggers()
                return

    def _pick_loggers(self, translator: KeyTranslator, tracker: Tracker) -> None:
        while True:
            tracker.handle(GameState.CHOOSE_LOGGER, self.loggers)
            action = translator.get_action()
            if action in (Action.ONE, Action.TWO, Action.THREE):
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                if action is Action.ONE:
                    self.loggers.append(FileLogger())
                elif action is Action.TWO:
                    self.loggers.append(TerminalLogger())
                else:
                    self.loggers.append(TerminalLogger())
                    self.loggers.append(FileLogger())
                return
            tracker.handle(GameState.KEY, self.loggers)

    def _choose_level(self, translator: KeyTranslator, tracker: Tracker) -> None:
        while True:
            tracker.handle(GameState.LEVEL, self.loggers)
            action = translator.get_action()
            if action in _LEVEL_CHOICES:
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                self.field.assign(create_level(_LEVEL_CHOICES[action]))
                return
            tracker.handle(GameState.KEY, self.loggers)

    def _play(self, translator: KeyTranslator, tracker: Tracker) -> None:
        tracker.handle(GameState.GAME, self.loggers)
        controller = Controller(self.player, self.field)
        while True:
            tracker.handle(GameState.PLAY, self.loggers)
            if self.player.is_dead():
                tracker.handle(GameState.LOSE, self.loggers)
                return
            if self.player.position == self.field.exit:
                tracker.handle(GameState.WIN, self.loggers)
                return
            action = translator.get_action()
            if action in _MOVES:
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                controller.walk(_MOVES[action])
            elif action is Action.QUIT:
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                return
            else:
                tracker.handle(GameState.KEY, self.loggers)

    def _ask_restart(self, translator: KeyTranslator, tracker: Tracker) -> bool:
        while True:
            tracker.handle(GameState.NEW, self.loggers)
            action = translator.get_action()
            if action is Action.YES:
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                return True
            if action is Action.NO:
                tracker.handle(GameState.KEY_COMMAND, self.loggers)
                tracker.handle(GameState.END, self.loggers)
                return False
            tracker.handle(GameState.KEY, self.loggers)

    def _close_loggers(self) -> None:
        for logger in self.loggers:
            logger.close()
        self.loggers.clear()

    def close(self) -> None:
        """Close and drop every active logger."""
        self._close_loggers()

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(prog="mazegame", description="A small maze game.")
    parser.add_argument(
        "keys",
        nargs="?",
        default=DEFAULT_KEYS_PATH,
        help="path of the control-keys file",
    )
    args = parser.parse_args(argv)
    try:
        with Game(KeyboardInput(), TerminalRenderer(), args.keys) as game:
            game.begin()
    except KeyMapError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())