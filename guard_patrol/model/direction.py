"""Heading and coordinate primitives for the guard patrol simulation."""

from enum import Enum
from typing import NamedTuple, Tuple

from .errors import OutOfBoundsError

# Signed displacement (dx, dy)
Move = Tuple[int, int]


class Direction(Enum):
    """
    Four-way heading of the guard.

    Coordinate convention: y grows downwards (row 0 is the first input line),
    so NORTH moves towards smaller y.
    """
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def position_delta(self) -> Move:
        """Unit displacement for one step in this heading."""
        return _DELTAS[self]

    def turn_right(self) -> "Direction":
        """Next heading clockwise (N -> E -> S -> W -> N)."""
        return _TURN_RIGHT[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_TURN_RIGHT = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_SYMBOLS = {
    Direction.NORTH: '^',
    Direction.EAST: '>',
    Direction.SOUTH: 'v',
    Direction.WEST: '<',
}

# Guards parsed from '^' markers always start facing north
DEFAULT_DIRECTION = Direction.NORTH


class Position(NamedTuple):
    """Non-negative grid coordinate."""
    x: int
    y: int

    def try_move(self, move: Move) -> "Position":
        """
        Apply a signed displacement.

        Raises OutOfBoundsError if either coordinate would become negative.
        Upper bounds are the area's concern, not the coordinate's.
        """
        dx, dy = move
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            raise OutOfBoundsError(f"Cannot move {self} by {move}")
        return Position(x, y)
