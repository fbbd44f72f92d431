"""Observation adapters (bar / tick normalization).

Public API:
- ObservationAdapter: Protocol every adapter satisfies
- RangePolicy: Protocol for deriving a tick's high/low
- BarAdapter, TickAdapter: the two built-in adapters
- RollingRange, SpreadRange: the two built-in tick range policies
- make_range_policy: build a range policy by name
"""

from trident.adapters.protocol import ObservationAdapter, RangePolicy
from trident.adapters.observation import BarAdapter, TickAdapter
from trident.adapters.range_window import (
    DEFAULT_RANGE_WINDOW,
    RANGE_POLICIES,
    RollingRange,
    SpreadRange,
    make_range_policy,
)

__all__ = [
    "ObservationAdapter",
    "RangePolicy",
    "BarAdapter",
    "TickAdapter",
    "DEFAULT_RANGE_WINDOW",
    "RANGE_POLICIES",
    "RollingRange",
    "SpreadRange",
    "make_range_policy",
]
