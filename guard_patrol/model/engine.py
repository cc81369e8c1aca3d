"""Path tracing engine for the guard patrol simulation."""

from typing import List, Optional, Set

from .area import Area
from .errors import ObstacleError, OutOfBoundsError
from .guard import Guard
from .state import GuardSnapshot, StopReason, TraceResult
from .strategy import SimpleStepPattern, StepStrategy


class PathTracer:
    """
    Drives a guard through an area until it stops or repeats a state.

    Implements:
    1. Stepping via a pluggable StepStrategy
    2. Loop detection over (position, direction) states
    3. Termination classification (out of bounds, enclosed, loop)

    The guard passed in is copied, so one initial guard can seed any number
    of independent traces.
    """

    def __init__(self, area: Area, guard: Guard,
                 strategy: Optional[StepStrategy] = None):
        self.area = area
        self.guard = guard.copy()
        self.strategy = strategy if strategy is not None else SimpleStepPattern()
        self.current_step = 0
        self.stop_reason: Optional[StopReason] = None

        self.trajectory: List[GuardSnapshot] = []
        self._seen: Set[GuardSnapshot] = set()
        self._record(self.guard.snapshot())

    def _record(self, state: GuardSnapshot) -> None:
        """Append state to the history, or stop on a repeat."""
        if state in self._seen:
            self.stop_reason = StopReason.LOOP
            return
        self._seen.add(state)
        self.trajectory.append(state)

    def step(self) -> GuardSnapshot:
        """
        Execute one move and return the guard's current state.

        After the trace has finished this is a no-op that returns the last
        recorded state.
        """
        if self.is_finished():
            return self.trajectory[-1]

        try:
            self.strategy.step(self.guard, self.area)
        except OutOfBoundsError:
            self.stop_reason = StopReason.OUT_OF_BOUNDS
        except ObstacleError:
            self.stop_reason = StopReason.OBSTACLE
        else:
            self.current_step += 1
            self._record(self.guard.snapshot())

        return self.trajectory[-1]

    def is_finished(self) -> bool:
        """Check if the trace has terminated."""
        return self.stop_reason is not None

    def run(self) -> TraceResult:
        """Step until termination and return the full trace."""
        while not self.is_finished():
            self.step()
        return self.result()

    def result(self) -> TraceResult:
        if self.stop_reason is None:
            raise RuntimeError("Trace has not finished yet")
        return TraceResult(trajectory=list(self.trajectory),
                           reason=self.stop_reason)

    @property
    def max_states(self) -> int:
        """Upper bound on distinct guard states in this area."""
        return self.area.width * self.area.height * 4


def trace_path(area: Area, guard: Guard,
               strategy: Optional[StepStrategy] = None) -> TraceResult:
    """Convenience wrapper: trace a guard from its initial state."""
    return PathTracer(area, guard, strategy).run()
