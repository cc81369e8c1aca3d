"""State snapshot dataclasses for the guard patrol simulation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .direction import Direction, Position


class StopReason(Enum):
    """Possible ways a trace can end."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OBSTACLE = "obstacle"
    LOOP = "loop"


@dataclass(frozen=True)
class GuardSnapshot:
    """Immutable guard state at a given time step."""
    x: int
    y: int
    direction: Direction

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass
class TraceResult:
    """Complete outcome of one patrol trace."""
    trajectory: List[GuardSnapshot]
    reason: StopReason

    @property
    def is_loop(self) -> bool:
        return self.reason == StopReason.LOOP

    @property
    def visited_positions(self) -> List[Position]:
        """Distinct cells in order of first visit."""
        return list(dict.fromkeys(s.position for s in self.trajectory))

    @property
    def visited_count(self) -> int:
        return len({s.position for s in self.trajectory})

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [
            {
                "step": i,
                "x": s.x,
                "y": s.y,
                "direction": s.direction.value
            }
            for i, s in enumerate(self.trajectory)
        ]


@dataclass
class SearchResult:
    """Outcome of the loop-inducing obstruction search."""
    loop_positions: List[Position] = field(default_factory=list)
    candidates_checked: int = 0

    @property
    def count(self) -> int:
        return len(self.loop_positions)

    def to_csv_rows(self) -> List[Dict]:
        return [{"x": p.x, "y": p.y} for p in self.loop_positions]
