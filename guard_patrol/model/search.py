"""Brute-force search for obstructions that trap the guard in a loop."""

import time
from concurrent import futures
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Iterator, List, Optional

from .area import Area
from .direction import Position
from .engine import PathTracer
from .guard import Guard
from .state import SearchResult
from .strategy import SimpleStepPattern, StepStrategy


def _is_loop_inducing(area: Area, guard: Guard, strategy: StepStrategy,
                      position: Position) -> bool:
    """Trace the guard with one extra obstruction at position."""
    candidate_area = area.clone()
    candidate_area.add_obstacle(position)
    return PathTracer(candidate_area, guard, strategy).run().is_loop


class LoopObstacleSearch:
    """
    Evaluates every free cell as a potential extra obstruction.

    Each candidate is traced from a fresh copy of the initial guard against
    a private clone of the baseline area, so candidates are independent and
    can be spread over a process pool. Results keep row-major order whatever
    the worker count.
    """

    def __init__(self, area: Area, guard: Guard,
                 strategy: Optional[StepStrategy] = None,
                 workers: int = 1,
                 chunk_size: int = 16,
                 timeout: Optional[float] = None):
        self.area = area
        self.guard = guard.copy()
        self.strategy = strategy if strategy is not None else SimpleStepPattern()
        self.workers = workers
        self.chunk_size = max(1, chunk_size)
        self.timeout = timeout

    def candidates(self) -> Iterator[Position]:
        """Free cells other than the guard's start, in row-major order."""
        for position in self.area.cells():
            if position == self.guard.position:
                continue
            if self.area.is_obstructed(position):
                continue
            yield position

    def is_loop_inducing(self, position: Position) -> bool:
        return _is_loop_inducing(self.area, self.guard, self.strategy, position)

    def run(self) -> SearchResult:
        """
        Evaluate all candidates and collect the loop-inducing ones.

        Raises TimeoutError when the search outlasts `timeout` seconds.
        """
        candidates = list(self.candidates())

        if self.workers <= 1:
            outcomes = self._run_sequential(candidates)
        else:
            outcomes = self._run_parallel(candidates)

        return SearchResult(
            loop_positions=[p for p, loops in zip(candidates, outcomes) if loops],
            candidates_checked=len(candidates)
        )

    def _run_sequential(self, candidates: List[Position]) -> List[bool]:
        deadline = None
        if self.timeout is not None:
            deadline = time.monotonic() + self.timeout

        outcomes = []
        for position in candidates:
            if deadline is not None and time.monotonic() > deadline:
                raise TimeoutError(
                    f"Search exceeded {self.timeout}s after "
                    f"{len(outcomes)} of {len(candidates)} candidates")
            outcomes.append(self.is_loop_inducing(position))
        return outcomes

    def _run_parallel(self, candidates: List[Position]) -> List[bool]:
        evaluate = partial(_is_loop_inducing, self.area, self.guard, self.strategy)
        executor = ProcessPoolExecutor(max_workers=self.workers)
        timed_out = False
        try:
            # map() preserves input order, keeping results deterministic
            return list(executor.map(evaluate, candidates,
                                     timeout=self.timeout,
                                     chunksize=self.chunk_size))
        except futures.TimeoutError:
            timed_out = True
            raise TimeoutError(f"Search exceeded {self.timeout}s") from None
        finally:
            # Pending candidates are dropped on timeout instead of awaited
            executor.shutdown(wait=not timed_out, cancel_futures=timed_out)


def count_loop_obstacles(area: Area, guard: Guard,
                         strategy: Optional[StepStrategy] = None,
                         workers: int = 1) -> int:
    return LoopObstacleSearch(area, guard, strategy, workers=workers).run().count
