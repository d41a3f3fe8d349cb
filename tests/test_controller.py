import pytest

from mazegame.controller import Controller, Direction, FirstAidKit, Mine, Teleport
from mazegame.field import Field
from mazegame.player import Player


def _setup(width=6, length=6):
    player = Player()
    field = Field(width, length)
    return player, field, Controller(player, field)


def test_controller_places_player_at_entrance():
    player = Player()
    field = Field()
    field.set_entrance(3, 2)
    Controller(player, field)
    assert player.position == field.entrance


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.DOWN, (2, 3)),
        (Direction.UP, (2, 1)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (3, 2)),
    ],
)
def test_walk_moves_one_step(direction, expected):
    player, field, controller = _setup()
    player.move_to(2, 2)
    controller.walk(direction)
    assert player.position == expected


def test_walk_off_field_is_ignored():
    player, _, controller = _setup()
    controller.walk(Direction.UP)
    controller.walk(Direction.LEFT)
    assert player.position == (0, 0)


def test_walk_into_wall_is_ignored():
    player, field, controller = _setup()
    field.cell(0, 1).passable = False
    controller.walk(Direction.DOWN)
    assert player.position == (0, 0)


def test_walk_rejects_unknown_direction():
    _, _, controller = _setup()
    with pytest.raises(ValueError):
        controller.walk("up")


def test_mine_hurts_and_disappears():
    player, field, controller = _setup()
    field.cell(0, 1).event = Mine()
    controller.walk(Direction.DOWN)
    assert player.health == Player.MAX_HEALTH - Mine.DAMAGE
    assert not field.cell(0, 1).has_event()


def test_first_aid_kit_heals_capped_and_gives_points():
    player, field, controller = _setup()
    field.cell(1, 0).event = FirstAidKit()
    controller.walk(Direction.RIGHT)
    assert player.health == Player.MAX_HEALTH
    assert player.points == FirstAidKit.POINTS


def test_first_aid_kit_after_mine():
    player, field, controller = _setup()
    field.cell(0, 1).event = Mine()
    field.cell(0, 2).event = FirstAidKit()
    controller.walk(Direction.DOWN)
    controller.walk(Direction.DOWN)
    assert player.health == Player.MAX_HEALTH - Mine.DAMAGE + FirstAidKit.HEAL


def test_teleport_moves_down_steps():
    player, field, controller = _setup(8, 8)
    field.cell(0, 1).event = Teleport()
    controller.walk(Direction.DOWN)
    assert player.position == (0, 1 + Teleport.STEPS)


def test_teleport_stops_at_wall():
    player, field, controller = _setup(8, 8)
    field.cell(0, 1).event = Teleport()
    field.cell(0, 3).passable = False
    controller.walk(Direction.DOWN)
    assert player.position == (0, 2)


def test_change_points_below_zero_is_ignored():
    player, _, controller = _setup()
    controller.change_points(-5)
    assert player.points == Player.START_POINTS


def test_change_level_beyond_max_is_ignored():
    player, _, controller = _setup()
    controller.change_level(Player.MAX_LEVEL)
    assert player.level == 1
    controller.change_level(1)
    assert player.level == 2


def test_change_health_to_death():
    player, _, controller = _setup()
    controller.change_health(-Player.MAX_HEALTH * 2)
    assert player.health == 0
    assert player.is_dead()


@pytest.mark.parametrize("event_type", [Mine, FirstAidKit, Teleport])
def test_create_makes_new_event_of_same_kind(event_type):
    event = event_type()
    fresh = event.create()
    assert type(fresh) is event_type
    assert fresh is not event