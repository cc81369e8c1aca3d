"""Shared grids for the guard patrol tests."""

import pytest

EXAMPLE_GRID = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

# Guard walks a 2x2 square forever
LOOP_GRID = """\
.#..
.^.#
#...
..#.
"""

# Guard boxed in on all four sides
ENCLOSED_GRID = """\
.#.
#^#
.#.
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_GRID


@pytest.fixture
def loop_text() -> str:
    return LOOP_GRID


@pytest.fixture
def enclosed_text() -> str:
    return ENCLOSED_GRID
