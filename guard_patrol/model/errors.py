"""Simulation outcome exceptions."""


class PatrolError(Exception):
    """Base class for guard movement and area errors."""


class OutOfBoundsError(PatrolError):
    """The target cell lies outside the area."""


class ObstacleError(PatrolError):
    """The target cell is obstructed (or every heading is blocked)."""
