"""The built-in level layouts."""

from __future__ import annotations

from mazegame.controller import FirstAidKit, Mine, Teleport
from mazegame.field import Field


def create_level1() -> Field:
    """Build the 8x8 first level."""
    field = Field(8, 8)
    for x, y in ((1, 1), (2, 2), (2, 3), (3, 3)):
        field.cell(x, y).passable = False
    field.cell(0, 1).event = Mine()
    field.cell(0, 2).event = FirstAidKit()
    field.cell(0, 3).event = Teleport()
    return field


def create_level2() -> Field:
    """Build the 10x10 second level."""
    field = Field(10, 10)
    field.set_entrance(field.width - 1, 0)
    field.set_exit(field.width - 1, field.length - 1)
    for x, y in ((9, 2), (8, 2)):
        field.cell(x, y).passable = False
    field.cell(7, 2).event = Mine()
    field.cell(7, 3).event = FirstAidKit()
    field.cell(9, 8).event = Teleport()
    return field


_LEVELS = {1: create_level1, 2: create_level2}


def create_level(number: int) -> Field:
    """Build the level with the given number."""
    try:
        builder = _LEVELS[number]
    except KeyError:
        raise ValueError(f"unknown level: {number}") from None
    return builder()