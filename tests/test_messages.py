import pytest

from mazegame.keymap import Action, InputSource, KeyTranslator
from mazegame.levels import create_level1, create_level2
from mazegame.messages import (
    KeyIgnoredMessage,
    KeyPushMessage,
    LoseMessage,
    NewGameMessage,
    WinMessage,
)
from mazegame.player import Player


class FakeInput(InputSource):
    def __init__(self, keys):
        self._keys = list(keys)

    def read_key(self):
        return self._keys.pop(0)


BINDINGS = {
    "w": Action.MOVE_UP,
    "s": Action.MOVE_DOWN,
    "1": Action.ONE,
    "q": Action.QUIT,
}


def test_win_message_fresh_player():
    assert WinMessage(Player()).text() == "Player WIN! Health = 100, Points = 0"


def test_win_message_tracks_player_changes():
    player = Player()
    message = WinMessage(player)
    player.health = 40
    player.points = 7
    assert message.text() == "Player WIN! Health = 40, Points = 7"


def test_lose_message():
    player = Player()
    player.move_to(3, 4)
    assert LoseMessage(player).text() == "Player LOSE! X, Y = 3, 4"


def test_new_game_message_level2():
    assert NewGameMessage(create_level2()).text() == (
        "A new game is loaded! Size field (length, width) = 10, 10"
        "; Start position (x, y) = 9, 0"
    )


def test_new_game_message_level1_prefix():
    text = NewGameMessage(create_level1()).text()
    assert text.startswith("A new game is loaded! Size field (length, width) = 8, 8")


@pytest.mark.parametrize(
    "key, command",
    [("w", "UP"), ("s", "DOWN"), ("1", "1"), ("q", "QUIT")],
)
def test_key_push_message(key, command):
    translator = KeyTranslator(FakeInput(key), BINDINGS)
    translator.get_action()
    assert KeyPushMessage(translator).text() == (
        f"A key has been entered = {key} after that, the command worked = {command}"
    )


def test_key_push_message_for_unknown_key_has_empty_command():
    translator = KeyTranslator(FakeInput("z"), BINDINGS)
    translator.get_action()
    assert KeyPushMessage(translator).text().endswith("the command worked = ")


def test_key_ignored_message():
    translator = KeyTranslator(FakeInput("x"), BINDINGS)
    translator.get_action()
    assert KeyIgnoredMessage(translator).text() == (
        "A key has been entered = x but nothing worked."
    )