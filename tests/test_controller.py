"""Tests for whiteout.player.controller — plow and shovel rules."""

from whiteout.player.controller import PlayerController
from whiteout.player.player import ToolMode
from whiteout.world.snow import SnowCell
from whiteout.world.world import World

RIGHT = (1, 0)
LEFT = (-1, 0)


def _shovel(world: World) -> PlayerController:
    controller = PlayerController(world)
    controller.flip_shovel()
    return controller


class TestFlipShovel:
    """Tests for switching tools."""

    def test_toggles(self, empty_world: World) -> None:
        controller = PlayerController(empty_world)
        controller.flip_shovel()
        assert empty_world.player.tool is ToolMode.SHOVEL
        controller.flip_shovel()
        assert empty_world.player.tool is ToolMode.PLOW
        assert empty_world.player.carrying.is_clear()

    def test_dumps_carry_on_player_cell(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.player.carrying = SnowCell(5)
        controller.flip_shovel()
        assert empty_world.snow_field.get(40, 12).height == 5
        assert empty_world.player.carrying.is_clear()
        assert empty_world.player.tool is ToolMode.PLOW

    def test_discards_what_does_not_fit(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.snow_field.get_mut(40, 12).height = 3
        empty_world.player.carrying = SnowCell(5)
        controller.flip_shovel()
        assert empty_world.snow_field.get(40, 12).height == 6
        assert empty_world.player.carrying.is_clear()
        assert empty_world.snow_field.total_snow() == 6


class TestPlow:
    """Tests for movement in plow mode."""

    def test_walks_on_empty_field(self, empty_world: World) -> None:
        PlayerController(empty_world).move_player(RIGHT)
        assert empty_world.player.position == (41, 12)
        assert empty_world.snow_field.total_snow() == 0

    def test_pushes_pile_and_steps(self, empty_world: World) -> None:
        empty_world.snow_field.get_mut(41, 12).height = 3
        PlayerController(empty_world).move_player(RIGHT)
        assert empty_world.player.position == (41, 12)
        assert empty_world.snow_field.get(41, 12).height == 0
        assert empty_world.snow_field.get(42, 12).height == 3

    def test_full_row_within_strength(self, empty_world: World) -> None:
        snow_field = empty_world.snow_field
        for x in range(41, 45):
            snow_field.get_mut(x, 12).height = 6
        PlayerController(empty_world).move_player(RIGHT)
        assert empty_world.player.position == (41, 12)
        assert [snow_field.get(x, 12).height for x in range(41, 46)] == [
            0,
            6,
            6,
            6,
            6,
        ]

    def test_blocked_push_is_noop(self, empty_world: World) -> None:
        snow_field = empty_world.snow_field
        for x in range(41, 46):
            snow_field.get_mut(x, 12).height = 6
        PlayerController(empty_world).move_player(RIGHT)
        assert empty_world.player.position == (40, 12)
        assert [snow_field.get(x, 12).height for x in range(41, 47)] == [
            6,
            6,
            6,
            6,
            6,
            0,
        ]

    def test_custom_strength(self, empty_world: World) -> None:
        snow_field = empty_world.snow_field
        for x in range(41, 43):
            snow_field.get_mut(x, 12).height = 6
        PlayerController(empty_world, strength=1).move_player(RIGHT)
        assert empty_world.player.position == (40, 12)

    def test_edge_of_field_is_noop(self, empty_world: World) -> None:
        empty_world.player.x = 0
        PlayerController(empty_world).move_player(LEFT)
        assert empty_world.player.position == (0, 12)


class TestShovel:
    """Tests for movement in shovel mode."""

    def test_walks_onto_clear_cell(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.player.carrying = SnowCell(2)
        controller.move_player(RIGHT)
        assert empty_world.player.position == (41, 12)
        assert empty_world.player.carrying.height == 2

    def test_lifts_pile(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.snow_field.get_mut(41, 12).height = 5
        controller.move_player(RIGHT)
        assert empty_world.player.position == (40, 12)
        assert empty_world.player.carrying.height == 5
        assert empty_world.snow_field.get(41, 12).is_clear()

    def test_lift_then_flip_drops_at_feet(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.snow_field.get_mut(41, 12).height = 5
        controller.move_player(RIGHT)
        controller.flip_shovel()
        assert empty_world.snow_field.get(40, 12).height == 5
        assert empty_world.snow_field.get(41, 12).height == 0
        assert empty_world.player.carrying.is_clear()
        assert empty_world.player.tool is ToolMode.PLOW

    def test_deposits_into_partial_pile(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.player.carrying = SnowCell(5)
        empty_world.snow_field.get_mut(41, 12).height = 2
        controller.move_player(RIGHT)
        assert empty_world.player.position == (40, 12)
        assert empty_world.snow_field.get(41, 12).height == 6
        assert empty_world.player.carrying.height == 1

    def test_full_target_with_carry_is_noop(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        empty_world.player.carrying = SnowCell(3)
        empty_world.snow_field.get_mut(41, 12).height = 6
        controller.move_player(RIGHT)
        assert empty_world.player.position == (40, 12)
        assert empty_world.snow_field.get(41, 12).height == 6
        assert empty_world.player.carrying.height == 3

    def test_conserves_snow(self, empty_world: World) -> None:
        controller = _shovel(empty_world)
        snow_field = empty_world.snow_field
        snow_field.get_mut(41, 12).height = 4
        snow_field.get_mut(40, 13).height = 3
        controller.move_player(RIGHT)
        controller.move_player((0, 1))
        carried = empty_world.player.carrying.height
        assert snow_field.total_snow() + carried == 7
