"""Adapter protocols turning raw observations into market points.

This module provides:
- ObservationAdapter: normalizes a bar or tick into a MarketPoint
- RangePolicy: supplies the high/low a tick does not carry itself
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from trident.models.observation import MarketPoint, Tick


@runtime_checkable
class ObservationAdapter(Protocol):
    """Protocol that every observation adapter must implement.

    Adapters may hold per-run state (a tick range window, for example).
    The driver calls ``reset()`` before each run so repeated runs over
    the same input are identical.
    """

    def adapt(self, observation) -> MarketPoint:
        """Normalize one observation.

        Raises:
            TypeError: If the observation has the wrong shape.
        """
        ...

    def reset(self) -> None:
        """Forget any state accumulated during a previous run."""
        ...


@runtime_checkable
class RangePolicy(Protocol):
    """Derives a (high, low) pair for each tick in arrival order."""

    def update(self, tick: Tick) -> tuple[float, float]:
        """Observe ``tick`` and return the high/low to use for it."""
        ...

    def reset(self) -> None:
        ...
