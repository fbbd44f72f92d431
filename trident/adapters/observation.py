"""Bar and tick observation adapters.

Both adapters expose ``from_options(range_policy=..., range_window=...)``
so a variant can build either one from the same engine settings.
"""

from __future__ import annotations

from trident.adapters.protocol import RangePolicy
from trident.adapters.range_window import (
    DEFAULT_RANGE_WINDOW,
    RollingRange,
    make_range_policy,
)
from trident.models.observation import Bar, MarketPoint, Tick


class BarAdapter:
    """Bars carry their own high/low; the close is the price."""

    @classmethod
    def from_options(cls, **options) -> BarAdapter:
        # Range options only apply to ticks
        return cls()

    def adapt(self, observation: Bar) -> MarketPoint:
        if not isinstance(observation, Bar):
            raise TypeError(
                f"BarAdapter expects Bar, got {type(observation).__name__}"
            )
        return MarketPoint(
            price=observation.close,
            high=observation.high,
            low=observation.low,
            volume=observation.volume,
        )

    def reset(self) -> None:
        pass


class TickAdapter:
    """Ticks use the last traded price; high/low come from a range policy."""

    def __init__(self, range_policy: RangePolicy | None = None):
        self.range_policy = (
            range_policy if range_policy is not None else RollingRange()
        )

    @classmethod
    def from_options(
        cls,
        range_policy: str = "rolling",
        range_window: int = DEFAULT_RANGE_WINDOW,
        **options,
    ) -> TickAdapter:
        return cls(make_range_policy(range_policy, range_window))

    def adapt(self, observation: Tick) -> MarketPoint:
        if not isinstance(observation, Tick):
            raise TypeError(
                f"TickAdapter expects Tick, got {type(observation).__name__}"
            )
        high, low = self.range_policy.update(observation)
        return MarketPoint(
            price=observation.last,
            high=high,
            low=low,
            volume=observation.volume,
        )

    def reset(self) -> None:
        self.range_policy.reset()
