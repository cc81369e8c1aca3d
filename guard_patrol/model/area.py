"""Bounded area with an obstruction field for the guard patrol simulation."""

import numpy as np
from typing import Iterator, List

from .direction import Position
from .errors import ObstacleError, OutOfBoundsError


class Area:
    """
    Rectangular patrol area with a boolean obstruction layer.

    Coordinate convention: Position(x, y) for API, [y, x] for array indexing.
    Obstructions can only be added, never removed.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

        # Boolean mask: True = obstruction
        self.obstacles = np.zeros((height, width), dtype=bool)

    def in_bound(self, position: Position) -> bool:
        """Check if cell lies within the rectangle."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstructed(self, position: Position) -> bool:
        """Check if cell holds an obstruction (out of bounds never does)."""
        if not self.in_bound(position):
            return False
        x, y = position
        return bool(self.obstacles[y, x])

    def add_obstacle(self, position: Position) -> None:
        """
        Record an obstruction at position.

        Raises OutOfBoundsError outside the rectangle and ObstacleError
        if the cell is already obstructed.
        """
        if not self.in_bound(position):
            raise OutOfBoundsError(
                f"Obstacle at {tuple(position)} outside "
                f"{self.width}x{self.height} area")

        x, y = position
        if self.obstacles[y, x]:
            raise ObstacleError(f"Cell {tuple(position)} is already obstructed")
        self.obstacles[y, x] = True

    def clone(self) -> "Area":
        """Independent copy; obstacles added to it stay local."""
        area = Area(self.width, self.height)
        area.obstacles = self.obstacles.copy()
        return area

    def cells(self) -> Iterator[Position]:
        """All cells in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def obstacle_positions(self) -> List[Position]:
        """Return obstructed cells in row-major order."""
        ys, xs = np.nonzero(self.obstacles)
        return [Position(int(x), int(y)) for x, y in zip(xs, ys)]

    @property
    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self.obstacles))

    def __repr__(self) -> str:
        return (f"Area(width={self.width}, height={self.height}, "
                f"obstacles={self.obstacle_count})")
