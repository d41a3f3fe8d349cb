"""Key bindings: reading keys and turning them into game actions."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Iterator, Mapping, Union


class Action(Enum):
    MOVE_UP = "UP"
    MOVE_DOWN = "DOWN"
    MOVE_LEFT = "LEFT"
    MOVE_RIGHT = "RIGHT"
    QUIT = "QUIT"
    YES = "YES"
    NO = "NO"
    UNKNOWN = "UNKNOWN"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"


REQUIRED_ACTIONS = (
    "UP", "DOWN", "LEFT", "RIGHT", "QUIT", "YES", "NO", "ONE", "TWO", "THREE",
)


class KeyMapError(Exception):
    """Raised when a control-keys file is missing or inconsistent."""


class InputSource(ABC):
    """Something that yields one key at a time."""

    @abstractmethod
    def read_key(self) -> str:
        """Block until a key is pressed and return it."""


def _getch() -> str:
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        char = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    if not char:
        raise EOFError("no more input")
    return char


class KeyboardInput(InputSource):
    """Reads single key presses from the terminal, lower-cased."""

    def read_key(self) -> str:
        return _getch().lower()


def decode_action(name: str) -> Action:
    """Map an action name from the control-keys file to an Action."""
    if name == Action.UNKNOWN.value:
        return Action.UNKNOWN
    try:
        return Action(name)
    except ValueError:
        return Action.UNKNOWN


def _pairs(text: str) -> Iterator[tuple[str, str]]:
    """Yield (key, action name): one character, then a whitespace-delimited word."""
    pos, end = 0, len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return
        key = text[pos]
        pos += 1
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return
        start = pos
        while pos < end and not text[pos].isspace():
            pos += 1
        yield key, text[start:pos]


def parse_control_keys(text: str) -> dict[str, Action]:
    """Parse control-keys text into a key-to-action mapping."""
    bindings: dict[str, Action] = {}
    assigned = dict.fromkeys(REQUIRED_ACTIONS, False)
    for raw_key, name in _pairs(text):
        key = raw_key.lower()
        if key in bindings:
            raise KeyMapError(f"Error: Key {key} is assigned to multiple actions")
        if assigned.get(name, False):
            raise KeyMapError(f"Error: Action {name} is assigned to multiple keys")
        bindings[key] = decode_action(name)
        assigned[name] = True
    for name, done in assigned.items():
        if not done:
            raise KeyMapError(f"Error: Action {name} is not assigned to any key")
    return bindings


def load_control_keys(path: Union[str, Path]) -> dict[str, Action]:
    """Read and parse a control-keys file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise KeyMapError("Failed to open file") from exc
    return parse_control_keys(text)


class KeyTranslator:
    """Reads keys from a source and remembers the last key and action."""

    def __init__(self, source: InputSource, bindings: Mapping[str, Action]) -> None:
        self.source = source
        self.bindings = dict(bindings)
        self.last_key = ""
        self.last_action = Action.UNKNOWN

    def get_action(self) -> Action:
        key = self.source.read_key()
        action = self.bindings.get(key, Action.UNKNOWN)
        self.last_key = key
        self.last_action = action
        return action