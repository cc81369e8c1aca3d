"""Tests for guard_patrol.model.area module."""

from __future__ import annotations

import pytest

from guard_patrol.model.area import Area
from guard_patrol.model.direction import Position
from guard_patrol.model.errors import ObstacleError, OutOfBoundsError


class TestBounds:
    def test_corners_in_bound(self) -> None:
        area = Area(3, 2)
        assert area.in_bound(Position(0, 0))
        assert area.in_bound(Position(2, 1))

    def test_past_edges_out_of_bound(self) -> None:
        area = Area(3, 2)
        assert not area.in_bound(Position(3, 0))
        assert not area.in_bound(Position(0, 2))

    def test_empty_area_has_no_cells(self) -> None:
        area = Area(0, 0)
        assert not area.in_bound(Position(0, 0))
        assert list(area.cells()) == []


class TestObstacles:
    def test_add_then_query(self) -> None:
        area = Area(4, 4)
        area.add_obstacle(Position(2, 1))
        assert area.is_obstructed(Position(2, 1))
        assert not area.is_obstructed(Position(1, 2))
        assert area.obstacle_count == 1

    def test_second_add_same_cell_raises(self) -> None:
        area = Area(4, 4)
        area.add_obstacle(Position(1, 1))
        with pytest.raises(ObstacleError):
            area.add_obstacle(Position(1, 1))
        assert area.obstacle_count == 1

    def test_out_of_bounds_add_always_raises(self) -> None:
        area = Area(2, 2)
        for _ in range(2):
            with pytest.raises(OutOfBoundsError):
                area.add_obstacle(Position(2, 0))
        area.add_obstacle(Position(0, 0))
        with pytest.raises(OutOfBoundsError):
            area.add_obstacle(Position(5, 5))

    def test_out_of_bounds_is_never_obstructed(self) -> None:
        area = Area(2, 2)
        assert not area.is_obstructed(Position(10, 10))

    def test_obstacle_positions_row_major(self) -> None:
        area = Area(3, 3)
        area.add_obstacle(Position(2, 2))
        area.add_obstacle(Position(0, 1))
        area.add_obstacle(Position(1, 0))
        assert area.obstacle_positions() == [
            Position(1, 0), Position(0, 1), Position(2, 2)
        ]


class TestClone:
    def test_clone_is_independent(self) -> None:
        area = Area(3, 3)
        area.add_obstacle(Position(0, 0))
        clone = area.clone()
        clone.add_obstacle(Position(1, 1))
        assert clone.is_obstructed(Position(0, 0))
        assert not area.is_obstructed(Position(1, 1))
        assert area.obstacle_count == 1
