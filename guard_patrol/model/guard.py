"""Guard agent for the patrol simulation."""

from typing import Optional

from .direction import DEFAULT_DIRECTION, Direction, Position
from .state import GuardSnapshot


class Guard:
    """
    Patrolling guard: a position plus a heading.

    Equality and hashing cover both fields, since the same cell faced in a
    different heading is a different simulation state.
    """

    def __init__(self, position: Position,
                 direction: Optional[Direction] = None):
        self.position = Position(*position)
        self.direction = direction if direction is not None else DEFAULT_DIRECTION

    def snapshot(self) -> GuardSnapshot:
        """Immutable copy of the current state."""
        return GuardSnapshot(
            x=self.position.x,
            y=self.position.y,
            direction=self.direction
        )

    def copy(self) -> "Guard":
        return Guard(self.position, self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guard):
            return NotImplemented
        return (self.position == other.position
                and self.direction == other.direction)

    def __hash__(self) -> int:
        return hash((self.position, self.direction))

    def __repr__(self) -> str:
        return (f"Guard(pos={tuple(self.position)}, "
                f"dir={self.direction.value})")
