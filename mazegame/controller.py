"""Moving the player around the field and the events that affect them."""

from __future__ import annotations

from contextlib import suppress
from enum import Enum

from mazegame.field import Event, Field
from mazegame.player import Player


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Controller:
    """Applies moves and effects to a player on a field."""

    def __init__(self, player: Player, field: Field) -> None:
        self.player = player
        self.field = field
        player.move_to(*field.entrance)

    def walk(self, direction: Direction) -> None:
        """Step one cell; blocked or off-field moves are ignored."""
        if not isinstance(direction, Direction):
            raise ValueError(f"unknown direction: {direction!r}")
        dx, dy = direction.value
        x, y = self.player.x + dx, self.player.y + dy
        if not self.field.contains(x, y):
            return
        cell = self.field.cell(x, y)
        if not cell.passable:
            return
        self.player.move_to(x, y)
        if cell.has_event():
            cell.launch(self)

    def change_health(self, delta: int) -> None:
        self.player.health = self.player.health + delta

    def change_points(self, delta: int) -> None:
        with suppress(ValueError):
            self.player.points = self.player.points + delta

    def change_level(self, delta: int) -> None:
        with suppress(ValueError):
            self.player.level = self.player.level + delta


class Mine(Event):
    """Hurts the player."""

    DAMAGE = 20

    def start(self, controller: Controller) -> None:
        controller.change_health(-self.DAMAGE)

    def create(self) -> "Mine":
        return Mine()


class FirstAidKit(Event):
    """Heals the player and awards points."""

    HEAL = 15
    POINTS = 2

    def start(self, controller: Controller) -> None:
        controller.change_health(self.HEAL)
        controller.change_points(self.POINTS)

    def create(self) -> "FirstAidKit":
        return FirstAidKit()


class Teleport(Event):
    """Pushes the player several cells down."""

    STEPS = 3

    def start(self, controller: Controller) -> None:
        for _ in range(self.STEPS):
            controller.walk(Direction.DOWN)

    def create(self) -> "Teleport":
        return Teleport()