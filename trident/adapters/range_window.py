"""Tick range policies.

A tick carries no high/low of its own, yet the true range and the
Fibonacci band need one. Two policies are provided:

``RollingRange``
    Rolling max/min of the last traded price over the most recent
    ``window`` ticks, the current tick included. Memory is bounded by
    a ``deque(maxlen=window)``.

``SpreadRange``
    The current quote only: ``high = max(ask, last)`` and
    ``low = min(bid, last)``.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from trident.models.observation import Tick

logger = logging.getLogger(__name__)

DEFAULT_RANGE_WINDOW = 20


class RollingRange:
    """Rolling high/low of ``tick.last`` over a fixed number of ticks.

    Parameters
    ----------
    window : int
        Number of ticks (current one included) the range spans.
        A window of 1 degenerates to ``high == low == last``.
    """

    def __init__(self, window: int = DEFAULT_RANGE_WINDOW):
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        self.window = window
        self._prices: deque[float] = deque(maxlen=window)

    def update(self, tick: Tick) -> tuple[float, float]:
        self._prices.append(tick.last)
        arr = np.asarray(self._prices, dtype=np.float64)
        return float(arr.max()), float(arr.min())

    def reset(self) -> None:
        logger.debug("Range window reset (%d ticks dropped)", len(self._prices))
        self._prices.clear()

    def __len__(self) -> int:
        return len(self._prices)


class SpreadRange:
    """High/low taken from the current quote and last trade."""

    def update(self, tick: Tick) -> tuple[float, float]:
        return max(tick.ask, tick.last), min(tick.bid, tick.last)

    def reset(self) -> None:
        pass


RANGE_POLICIES = ("rolling", "spread")


def make_range_policy(
    name: str = "rolling", window: int = DEFAULT_RANGE_WINDOW
) -> RollingRange | SpreadRange:
    """Build a tick range policy by name.

    Args:
        name: "rolling" or "spread"
        window: Tick count for the rolling policy (ignored by "spread")

    Raises:
        ValueError: If the name is not a known policy.
    """
    if name == "rolling":
        return RollingRange(window)
    if name == "spread":
        return SpreadRange()
    raise ValueError(
        f"Unknown range policy '{name}'. Available: {', '.join(RANGE_POLICIES)}"
    )
