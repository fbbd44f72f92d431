"""Signal data models."""

from dataclasses import dataclass
from enum import Enum

from trident.models.state import IndicatorState


class Direction(int, Enum):
    """Trade direction."""

    LONG = 1
    SHORT = -1


@dataclass(frozen=True, slots=True)
class Signal:
    """Trading signal emitted for one step. Never revised once created."""

    direction: Direction
    time_index: float
    price: float  # projected price of the state that fired
    take_profit: float
    stop_loss: float
    fitness: float

    @classmethod
    def from_state(
        cls, direction: Direction, time_index: float, state: IndicatorState
    ) -> "Signal":
        return cls(
            direction=direction,
            time_index=time_index,
            price=state.price,
            take_profit=state.take_profit,
            stop_loss=state.stop_loss,
            fitness=state.fitness,
        )

    def describe(self) -> str:
        """One-line summary, e.g. ``LONG at t=3.0, price=101.25, ...``."""
        return (
            f"{self.direction.name} at t={self.time_index:.1f}, "
            f"price={self.price:.2f}, TP={self.take_profit:.2f}, "
            f"SL={self.stop_loss:.2f}, Fitness={self.fitness:.3f}"
        )
