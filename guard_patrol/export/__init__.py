"""I/O package for the guard patrol simulation."""

from .csv_writer import CSVWriter, TRAJECTORY_FIELDS, OBSTACLE_FIELDS
from .visualizer import Visualizer
from .reporter import Reporter, render_ascii

__all__ = [
    'CSVWriter',
    'TRAJECTORY_FIELDS',
    'OBSTACLE_FIELDS',
    'Visualizer',
    'Reporter',
    'render_ascii',
]
