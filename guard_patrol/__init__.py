"""Guard patrol simulation and loop obstruction search."""

from .parser import GridParseError, parse_area, parse_grid
from .puzzle import part_one, part_two

__all__ = ['GridParseError', 'parse_area', 'parse_grid', 'part_one', 'part_two']
