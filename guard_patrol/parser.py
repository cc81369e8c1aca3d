"""Text grid parsing for the guard patrol simulation."""

from typing import List, Tuple

from .model.area import Area
from .model.direction import DEFAULT_DIRECTION, Position
from .model.guard import Guard

EMPTY = '.'
OBSTACLE = '#'
GUARD = '^'


class GridParseError(ValueError):
    """Malformed grid text."""


def parse_area(text: str) -> Tuple[Area, List[Guard]]:
    """
    Parse a grid into an Area and every guard marker found.

    Guards are returned in row-major order, all facing north.
    Raises GridParseError on unknown symbols or ragged rows.
    """
    # Only '\n' (optionally preceded by '\r') separates rows
    lines = [line[:-1] if line.endswith('\r') else line
             for line in text.split('\n')]
    while lines and not lines[-1]:
        lines.pop()

    height = len(lines)
    width = len(lines[0]) if lines else 0

    area = Area(width, height)
    guards: List[Guard] = []

    for y, line in enumerate(lines):
        if len(line) != width:
            raise GridParseError(
                f"Row {y} has length {len(line)}, expected {width}")
        for x, square in enumerate(line):
            if square == EMPTY:
                continue
            elif square == OBSTACLE:
                # Each cell is visited once, so this cannot collide
                area.add_obstacle(Position(x, y))
            elif square == GUARD:
                guards.append(Guard(Position(x, y), DEFAULT_DIRECTION))
            else:
                raise GridParseError(
                    f"Unexpected char '{square}' at square ({x}, {y})")

    return area, guards


def parse_grid(text: str) -> Tuple[Area, Guard]:
    """
    Parse a grid holding a single guard.

    When several markers are present the first in row-major order is
    authoritative; the rest are treated as empty floor.
    """
    area, guards = parse_area(text)
    if not guards:
        raise GridParseError("No guard marker '^' found in grid")
    return area, guards[0]
