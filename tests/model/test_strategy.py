"""Tests for guard_patrol.model.strategy module."""

from __future__ import annotations

import pytest

from guard_patrol.model.area import Area
from guard_patrol.model.direction import Direction, Position
from guard_patrol.model.errors import ObstacleError, OutOfBoundsError
from guard_patrol.model.guard import Guard
from guard_patrol.model.strategy import SimpleStepPattern, get_strategy


def _area(width: int, height: int, *obstacles) -> Area:
    area = Area(width, height)
    for x, y in obstacles:
        area.add_obstacle(Position(x, y))
    return area


class TestSimpleStepPattern:
    def test_moves_straight_ahead(self) -> None:
        guard = Guard(Position(1, 1), Direction.NORTH)
        SimpleStepPattern().step(guard, _area(3, 3))
        assert guard == Guard(Position(1, 0), Direction.NORTH)

    def test_turns_right_on_obstruction(self) -> None:
        guard = Guard(Position(1, 1), Direction.NORTH)
        SimpleStepPattern().step(guard, _area(3, 3, (1, 0)))
        assert guard == Guard(Position(2, 1), Direction.EAST)

    def test_turns_twice_when_needed(self) -> None:
        guard = Guard(Position(1, 1), Direction.NORTH)
        SimpleStepPattern().step(guard, _area(3, 3, (1, 0), (2, 1)))
        assert guard == Guard(Position(1, 2), Direction.SOUTH)

    def test_leaving_area_raises(self) -> None:
        guard = Guard(Position(2, 0), Direction.EAST)
        with pytest.raises(OutOfBoundsError):
            SimpleStepPattern().step(guard, _area(3, 1))

    def test_negative_coordinate_raises(self) -> None:
        guard = Guard(Position(0, 0), Direction.WEST)
        with pytest.raises(OutOfBoundsError):
            SimpleStepPattern().step(guard, _area(3, 3))

    def test_enclosed_raises_obstacle(self) -> None:
        guard = Guard(Position(1, 1), Direction.NORTH)
        area = _area(3, 3, (1, 0), (2, 1), (1, 2), (0, 1))
        with pytest.raises(ObstacleError):
            SimpleStepPattern().step(guard, area)


class TestNoMutationOnError:
    def test_turn_then_out_of_bounds_keeps_heading(self) -> None:
        # Blocked north, then east leads off the grid
        guard = Guard(Position(2, 1), Direction.NORTH)
        before = guard.copy()
        with pytest.raises(OutOfBoundsError):
            SimpleStepPattern().step(guard, _area(3, 2, (2, 0)))
        assert guard == before
        assert guard.direction == Direction.NORTH

    def test_enclosed_keeps_state(self) -> None:
        area = _area(3, 3, (1, 0), (2, 1), (1, 2), (0, 1))
        for d in Direction:
            guard = Guard(Position(1, 1), d)
            before = guard.copy()
            with pytest.raises(ObstacleError):
                SimpleStepPattern().step(guard, area)
            assert guard == before

    def test_off_grid_keeps_state(self) -> None:
        guard = Guard(Position(0, 0), Direction.NORTH)
        before = guard.copy()
        with pytest.raises(OutOfBoundsError):
            SimpleStepPattern().step(guard, _area(1, 1))
        assert guard == before


class TestRegistry:
    def test_simple_is_registered(self) -> None:
        assert isinstance(get_strategy("simple"), SimpleStepPattern)

    def test_unknown_strategy_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown step strategy"):
            get_strategy("diagonal")
