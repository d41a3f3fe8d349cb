# mazegame

A small maze game played in the terminal, and a companion tool for
processing sentences of text. No third-party libraries are needed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The maze game

```
mazegame [KEYS]
```

`KEYS` is the path of a control-keys file; it defaults to `control_keys`
in the current directory. No such file comes with the package: you write
it yourself (see below). If the file is missing or inconsistent, the
error is printed to standard error and the command exits with status 1.

The game greets you and, on the first round only, asks whether you want
a logger: to a file, to the terminal, or both. It then lets you choose
level 1 (8×8) or level 2 (10×10). You walk the player `P` from the
entrance `[]` to the exit `{}`. Keys are read one at a time straight
from the terminal, without Enter, and the screen is cleared after each
key.

Map symbols:

| Symbol | Meaning |
|--------|---------|
| `P `   | the player |
| `[]`   | entrance |
| `{}`   | exit |
| `+ `   | first-aid kit: +15 health, +2 points |
| `@ `   | mine: -20 health |
| `0 `   | teleport: three steps down |
| `# `   | wall |
| `. `   | floor |

The player starts with 100 health, which is also the maximum. Moves into
walls or off the map are ignored. Each event fires once and then
disappears from its cell; a teleport's three steps down stop at walls
and the map edge, and any event on a cell passed through fires too.
Health at zero ends the round as a loss; reaching the exit wins it; the
QUIT key ends it early. Afterwards you are asked whether to play again.

### Control keys

The control-keys file holds pairs of a single key character followed by
an action name, separated by whitespace, for example

```
w UP
s DOWN
a LEFT
d RIGHT
q QUIT
y YES
n NO
1 ONE
2 TWO
3 THREE
```

All ten actions must be bound, no key may be bound twice and no action
may be bound to two keys. Keys are lower-cased, both in the file and
when pressed.

### Logging

When logging is on, every recognised key press, every ignored key, the
start of a game, and every win or loss are recorded. The file logger
writes to `file_for_log` in the current directory, overwriting it.

### From Python

- `mazegame.game.Game(source, renderer, keys_path)` runs the game loop;
  `begin()` plays rounds, `close()` closes the loggers, and it works as a
  context manager.
- `mazegame.field.Field`, `Cell` and `Event`, `mazegame.player.Player`,
  and `mazegame.controller.Controller` with `Direction`, `Mine`,
  `FirstAidKit` and `Teleport` model the map and its events.
- `mazegame.levels.create_level(number)` builds level 1 or 2.
- `mazegame.keymap` parses key bindings (`parse_control_keys`,
  `load_control_keys`, raising `KeyMapError`) and reads keys
  (`KeyboardInput`, `KeyTranslator`).
- `mazegame.render.TerminalRenderer`, `mazegame.loggers.FileLogger` and
  `TerminalLogger` write output; `format_field` and `format_player`
  return the drawn text.

## The sentence tool

```
mazegame-sentences
```

Type one line of text made of sentences ending in `.` and press Enter.
Spaces after each period are dropped, text after the last period is
ignored, and repeated sentences are removed. Then enter a number:

1. In each sentence, replace the first date written as
   `<year> <Mon> <day>` (for example `1886 Jun 03`) with the number of
   hours left until the end of the year, counted as a 365-day year.
2. Print all sentences with words coloured alternately green and red,
   starting with green.
3. Remove sentences that start and end with the same word.
4. Sort sentences by the sum of the character codes of their first word.
5. Quit.

Any other input prints an error message and ends the program.

The same operations are available from Python in `mazegame.sentences`:
`read_sentences`, `remove_duplicates`, `replace_dates`, `mark_words`,
`remove_same_ends`, `sort_by_first_word`, `first_word_code_sum` and
`hours_to_year_end`.

## What it does not do

The game has no saved games, no score table and no level editor; the two
levels are built into `mazegame.levels`. Key input needs a real terminal
(Windows console or a POSIX terminal); without one, reading a key fails.