"""Movement rules deciding where a guard goes next."""

from abc import ABC, abstractmethod
from typing import Dict, Type, TYPE_CHECKING

from .errors import ObstacleError, OutOfBoundsError

if TYPE_CHECKING:
    from .area import Area
    from .guard import Guard


class StepStrategy(ABC):
    """
    Decides the next state of a guard from a context.

    The context only needs two queries: in_bound(position) and
    is_obstructed(position). Area provides both.
    """

    @abstractmethod
    def step(self, guard: "Guard", context: "Area") -> None:
        """
        Advance the guard by one move.

        Raises OutOfBoundsError or ObstacleError when no move is possible.
        Never changes the guard on error.
        """


class SimpleStepPattern(StepStrategy):
    """
    Walk straight ahead, turning right on every obstruction.

    Each heading is tried at most once per step, so a fully enclosed guard
    fails with ObstacleError instead of spinning.
    """

    def step(self, guard: "Guard", context: "Area") -> None:
        direction = guard.direction

        for _ in range(4):
            # Negative coordinates raise OutOfBoundsError here
            candidate = guard.position.try_move(direction.position_delta())

            if not context.in_bound(candidate):
                raise OutOfBoundsError(f"{guard} would leave the area")

            if context.is_obstructed(candidate):
                direction = direction.turn_right()
                continue

            guard.position = candidate
            guard.direction = direction
            return

        raise ObstacleError(f"{guard} is enclosed on all sides")


STRATEGIES: Dict[str, Type[StepStrategy]] = {
    'simple': SimpleStepPattern,
}


def get_strategy(name: str) -> StepStrategy:
    """Instantiate a registered strategy by name."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown step strategy: {name} "
            f"(available: {', '.join(sorted(STRATEGIES))})") from None
