"""Puzzle-style queries over a grid text."""

from .model.engine import trace_path
from .model.search import count_loop_obstacles
from .parser import parse_grid


def part_one(text: str) -> int:
    """Number of distinct cells the guard visits before stopping."""
    area, guard = parse_grid(text)
    return trace_path(area, guard).visited_count


def part_two(text: str, workers: int = 1) -> int:
    """Number of single obstructions that trap the guard in a loop."""
    area, guard = parse_grid(text)
    return count_loop_obstacles(area, guard, workers=workers)
