"""Indicator state carried from one observation to the next.

These models use:
- @dataclass(frozen=True, slots=True) so every step yields a new snapshot
- float for every field (no Decimal on the hot path)
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class IndicatorState:
    """Indicator vector after one step of the recurrence.

    ``price`` is the projected price (observed price plus the previous
    step's velocity), not the raw observed price.
    """

    ema_fast: float
    ema_slow: float
    vwap: float
    price: float
    momentum: float
    rsi: float
    atr: float
    dprice_dt: float
    gain: float
    loss: float
    tr: float
    rs: float
    vol_ema: float
    price_volatility: float
    take_profit: float
    stop_loss: float
    fitness: float
    fib_support: float
    fib_resistance: float
    acceleration: float
    jerk: float

    @classmethod
    def seed(cls, price: float) -> "IndicatorState":
        """Build the initial state from the first observed price."""
        return cls(
            ema_fast=price,
            ema_slow=price,
            vwap=price,
            price=price,
            momentum=0.0,
            rsi=50.0,
            atr=0.0,
            dprice_dt=0.0,
            gain=0.0,
            loss=0.0,
            tr=0.0,
            rs=1.0,
            vol_ema=0.0,
            price_volatility=0.0,
            take_profit=price * 1.02,
            stop_loss=price * 0.98,
            fitness=0.0,
            fib_support=price * 0.9,
            fib_resistance=price * 1.1,
            acceleration=0.0,
            jerk=0.0,
        )

    def to_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class VwapAccumulator:
    """Running VWAP sums, threaded beside the state by the driver."""

    cumulative_price_volume: float = 0.0
    cumulative_volume: float = 0.0


STATE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(IndicatorState))
