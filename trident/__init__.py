"""Trident indicator and signal engine.

This package contains pure business logic with no I/O dependencies
(no database, network or file output). It advances an immutable
indicator state one price observation at a time and classifies each
step into a LONG, SHORT or no signal.
"""

from trident.engine import SignalEngine, run_signals
from trident.models import (
    Bar,
    Direction,
    Genome,
    IndicatorState,
    Signal,
    Tick,
    DEFAULT_BAR_GENOME,
    DEFAULT_TICK_GENOME,
    default_genome,
)

__all__ = [
    "SignalEngine",
    "run_signals",
    "Bar",
    "Tick",
    "Direction",
    "Genome",
    "IndicatorState",
    "Signal",
    "DEFAULT_BAR_GENOME",
    "DEFAULT_TICK_GENOME",
    "default_genome",
]
