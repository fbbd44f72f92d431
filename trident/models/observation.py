"""Price observation models.

Observations use @dataclass(slots=True) with float fields, the same
hot path layout as the rest of the engine. Nothing here is validated:
``high >= low`` is expected of a bar but never enforced.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Bar:
    """OHLCV bar (candlestick)."""

    open: float
    high: float
    low: float
    close: float
    volume: float
    timestamp: float | None = None  # Unix timestamp in seconds, informational


@dataclass(frozen=True, slots=True)
class Tick:
    """Top-of-book quote with the last traded price."""

    bid: float
    ask: float
    last: float
    volume: float
    timestamp: float  # Unix timestamp in seconds


@dataclass(frozen=True, slots=True)
class MarketPoint:
    """Normalized observation consumed by the indicator recurrence.

    The previous close is not part of the point: the driver supplies it
    from the previous state.
    """

    price: float
    high: float
    low: float
    volume: float
