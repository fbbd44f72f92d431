"""Tests for observation adapters and tick range policies."""

import math

import pytest

from trident.adapters import (
    BarAdapter,
    ObservationAdapter,
    RangePolicy,
    RollingRange,
    SpreadRange,
    TickAdapter,
    make_range_policy,
)
from trident.models import Bar, Tick


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_tick(
    last: float,
    bid: float | None = None,
    ask: float | None = None,
    volume: float = 1.0,
    timestamp: float = 0.0,
) -> Tick:
    """Build a tick with a 0.1 spread around ``last`` by default."""
    return Tick(
        bid=last - 0.05 if bid is None else bid,
        ask=last + 0.05 if ask is None else ask,
        last=last,
        volume=volume,
        timestamp=timestamp,
    )


class TestBarAdapter:
    """Tests for BarAdapter."""

    def test_adapt_bar(self):
        """Close becomes the price; high/low/volume pass through."""
        point = BarAdapter().adapt(
            Bar(open=100.0, high=103.0, low=98.0, close=101.0, volume=42.0)
        )
        assert point.price == 101.0
        assert point.high == 103.0
        assert point.low == 98.0
        assert point.volume == 42.0

    def test_rejects_tick(self):
        """A tick is not a bar."""
        with pytest.raises(TypeError, match="BarAdapter expects Bar"):
            BarAdapter().adapt(make_tick(100.0))

    def test_satisfies_protocol(self):
        """Built-in adapters satisfy the runtime protocol."""
        assert isinstance(BarAdapter(), ObservationAdapter)
        assert isinstance(TickAdapter(), ObservationAdapter)


class TestRollingRange:
    """Tests for the rolling tick range."""

    def test_window_includes_current_tick(self):
        """The first tick's range is its own price."""
        policy = RollingRange(window=3)
        assert policy.update(make_tick(100.0)) == (100.0, 100.0)

    def test_rolling_high_low(self):
        """High/low track the most recent ``window`` prices only."""
        policy = RollingRange(window=3)
        results = [policy.update(make_tick(p)) for p in [100.0, 105.0, 98.0, 101.0, 102.0]]

        assert results[1] == (105.0, 100.0)
        assert results[2] == (105.0, 98.0)
        # window [98, 101, 102]: 105 has dropped out
        assert results[4] == (102.0, 98.0)
        assert len(policy) == 3

    def test_reset(self):
        """Reset forgets previous ticks."""
        policy = RollingRange(window=5)
        policy.update(make_tick(200.0))
        policy.reset()
        assert len(policy) == 0
        assert policy.update(make_tick(100.0)) == (100.0, 100.0)

    def test_invalid_window(self):
        """A window must hold at least one tick."""
        with pytest.raises(ValueError, match="window must be >= 1"):
            RollingRange(window=0)

    def test_returns_plain_floats(self):
        """Range values are Python floats, not numpy scalars."""
        high, low = RollingRange().update(make_tick(100.0))
        assert type(high) is float
        assert type(low) is float

    def test_nan_propagates(self):
        """A NaN price poisons the range while it is inside the window."""
        policy = RollingRange(window=2)
        policy.update(make_tick(100.0))
        high, low = policy.update(make_tick(float("nan")))
        assert math.isnan(high) and math.isnan(low)


class TestSpreadRange:
    """Tests for the quote-based tick range."""

    def test_spread_range(self):
        """High/low come from the quote."""
        policy = SpreadRange()
        assert policy.update(make_tick(100.0, bid=99.0, ask=101.0)) == (101.0, 99.0)

    def test_last_outside_quote(self):
        """A trade through the quote widens the range."""
        policy = SpreadRange()
        assert policy.update(make_tick(102.0, bid=99.0, ask=101.0)) == (102.0, 99.0)
        assert policy.update(make_tick(98.0, bid=99.0, ask=101.0)) == (101.0, 98.0)

    def test_satisfies_protocol(self):
        """Both policies satisfy the runtime protocol."""
        assert isinstance(SpreadRange(), RangePolicy)
        assert isinstance(RollingRange(), RangePolicy)


class TestTickAdapter:
    """Tests for TickAdapter."""

    def test_default_policy_is_rolling(self):
        """Without a policy, ticks use a rolling range."""
        assert isinstance(TickAdapter().range_policy, RollingRange)

    def test_adapt_tick(self):
        """Last price and volume pass through; high/low come from the policy."""
        adapter = TickAdapter(RollingRange(window=2))
        adapter.adapt(make_tick(100.0))
        point = adapter.adapt(make_tick(101.0, volume=7.0))

        assert point.price == 101.0
        assert point.high == 101.0
        assert point.low == 100.0
        assert point.volume == 7.0

    def test_reset_clears_policy(self):
        """Adapter reset is forwarded to the policy."""
        policy = RollingRange(window=4)
        adapter = TickAdapter(policy)
        adapter.adapt(make_tick(100.0))
        adapter.reset()
        assert len(policy) == 0

    def test_rejects_bar(self):
        """A bar is not a tick."""
        with pytest.raises(TypeError, match="TickAdapter expects Tick"):
            TickAdapter().adapt(Bar(open=1.0, high=1.0, low=1.0, close=1.0, volume=1.0))

    def test_keeps_given_policy(self):
        """A fresh, still empty policy is used as given, window included."""
        policy = RollingRange(window=2)
        adapter = TickAdapter(policy)
        assert adapter.range_policy is policy

        adapter.adapt(make_tick(100.0))
        adapter.adapt(make_tick(90.0))
        point = adapter.adapt(make_tick(80.0))

        # 100 has left the two-tick window
        assert point.high == 90.0
        assert point.low == 80.0

    def test_from_options(self):
        """Range options pick the policy and window."""
        rolling = TickAdapter.from_options(range_policy="rolling", range_window=5)
        assert isinstance(rolling.range_policy, RollingRange)
        assert rolling.range_policy.window == 5

        spread = TickAdapter.from_options(range_policy="spread", range_window=5)
        assert isinstance(spread.range_policy, SpreadRange)

    def test_bar_adapter_ignores_range_options(self):
        """Bars have their own high/low; range options are accepted and unused."""
        adapter = BarAdapter.from_options(range_policy="spread", range_window=3)
        assert isinstance(adapter, BarAdapter)


class TestMakeRangePolicy:
    """Tests for building range policies by name."""

    def test_defaults(self):
        policy = make_range_policy()
        assert isinstance(policy, RollingRange)
        assert policy.window == 20

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available: rolling, spread"):
            make_range_policy("vwap")
