"""The player's state: health, points, level and position."""

from __future__ import annotations


class Player:
    """A player on the field with bounded health, points and level."""

    MAX_HEALTH = 100
    START_POINTS = 0
    MAX_LEVEL = 5
    START_X = 0
    START_Y = 0

    def __init__(self) -> None:
        self._health = self.MAX_HEALTH
        self._points = self.START_POINTS
        self._level = 1
        self.x = self.START_X
        self.y = self.START_Y

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        """Set health, clamped to the range 0..MAX_HEALTH."""
        self._health = max(0, min(value, self.MAX_HEALTH))

    @property
    def points(self) -> int:
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        if value < self.START_POINTS:
            raise ValueError(f"points cannot drop below {self.START_POINTS}: {value}")
        self._points = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if not 1 <= value <= self.MAX_LEVEL:
            raise ValueError(f"level must be between 1 and {self.MAX_LEVEL}: {value}")
        self._level = value

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Place the player at the given coordinates."""
        self.x = x
        self.y = y

    def is_dead(self) -> bool:
        """Return True once the player's health has run out."""
        return self._health <= 0