"""Model package for the guard patrol simulation."""

from .errors import PatrolError, OutOfBoundsError, ObstacleError
from .direction import Direction, Position, DEFAULT_DIRECTION
from .state import GuardSnapshot, StopReason, TraceResult, SearchResult
from .area import Area
from .guard import Guard
from .strategy import StepStrategy, SimpleStepPattern, get_strategy
from .engine import PathTracer, trace_path
from .search import LoopObstacleSearch, count_loop_obstacles

__all__ = [
    'PatrolError',
    'OutOfBoundsError',
    'ObstacleError',
    'Direction',
    'Position',
    'DEFAULT_DIRECTION',
    'GuardSnapshot',
    'StopReason',
    'TraceResult',
    'SearchResult',
    'Area',
    'Guard',
    'StepStrategy',
    'SimpleStepPattern',
    'get_strategy',
    'PathTracer',
    'trace_path',
    'LoopObstacleSearch',
    'count_loop_obstacles',
]
