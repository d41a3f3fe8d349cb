import pytest

from mazegame.controller import Controller, Direction, FirstAidKit, Mine, Teleport
from mazegame.levels import create_level, create_level1, create_level2
from mazegame.player import Player


def test_level1_layout():
    field = create_level1()
    assert (field.width, field.length) == (8, 8)
    assert field.entrance == (0, 0)
    assert field.exit == (0, field.length - 1)
    for x, y in ((1, 1), (2, 2), (2, 3), (3, 3)):
        assert not field.cell(x, y).passable
    assert isinstance(field.cell(0, 1).event, Mine)
    assert isinstance(field.cell(0, 2).event, FirstAidKit)
    assert isinstance(field.cell(0, 3).event, Teleport)


def test_level2_layout():
    field = create_level2()
    assert (field.width, field.length) == (10, 10)
    assert field.entrance == (field.width - 1, 0)
    assert field.exit == (field.width - 1, field.length - 1)
    assert not field.cell(9, 2).passable
    assert not field.cell(8, 2).passable
    assert isinstance(field.cell(7, 2).event, Mine)
    assert isinstance(field.cell(7, 3).event, FirstAidKit)
    assert isinstance(field.cell(9, 8).event, Teleport)


def test_create_level_dispatches():
    assert create_level(1).length == create_level1().length
    assert create_level(2).entrance == create_level2().entrance


@pytest.mark.parametrize("number", [0, 3, -1])
def test_create_level_unknown(number):
    with pytest.raises(ValueError):
        create_level(number)


def test_levels_are_independent():
    first = create_level1()
    second = create_level1()
    first.cell(0, 1).clear_event()
    assert second.cell(0, 1).has_event()


def test_level1_walk_down_through_events():
    player = Player()
    field = create_level1()
    controller = Controller(player, field)
    for _ in range(3):
        controller.walk(Direction.DOWN)
    assert player.health == Player.MAX_HEALTH - Mine.DAMAGE + FirstAidKit.HEAL
    assert player.points == FirstAidKit.POINTS
    assert player.position == (0, 3 + Teleport.STEPS)
    controller.walk(Direction.DOWN)
    assert player.position == field.exit


def test_level2_wall_blocks_and_teleport_reaches_exit():
    player = Player()
    field = create_level2()
    controller = Controller(player, field)
    controller.walk(Direction.DOWN)
    controller.walk(Direction.DOWN)
    assert player.position == (field.width - 1, 1)
    player.move_to(9, 7)
    controller.walk(Direction.DOWN)
    assert player.position == field.exit