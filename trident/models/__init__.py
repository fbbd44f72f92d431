"""Data models for observations, genomes, indicator state and signals."""

from trident.models.genome import (
    Genome,
    GENOME_PRESETS,
    DEFAULT_BAR_GENOME,
    DEFAULT_TICK_GENOME,
    default_genome,
)
from trident.models.observation import Bar, Tick, MarketPoint
from trident.models.signal import Direction, Signal
from trident.models.state import IndicatorState, VwapAccumulator, STATE_FIELDS

__all__ = [
    "Genome",
    "GENOME_PRESETS",
    "DEFAULT_BAR_GENOME",
    "DEFAULT_TICK_GENOME",
    "default_genome",
    "Bar",
    "Tick",
    "MarketPoint",
    "Direction",
    "Signal",
    "IndicatorState",
    "VwapAccumulator",
    "STATE_FIELDS",
]
