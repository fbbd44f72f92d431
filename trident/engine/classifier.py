"""Signal classifier.

Signal Logic (all on the new state except the volume EMA, which is
compared new-vs-previous):
- LONG: fast EMA above slow EMA, price above VWAP, RSI below threshold,
  positive momentum, rising volume EMA, price above Fibonacci support
- SHORT: the mirror image, with RSI above ``100 - threshold`` and price
  below Fibonacci resistance

The EMA ordering makes the two rules mutually exclusive; LONG is
checked first regardless.
"""

from trident.models.genome import Genome
from trident.models.signal import Direction, Signal
from trident.models.state import IndicatorState


def is_long(prev: IndicatorState, new: IndicatorState, genome: Genome) -> bool:
    return (
        new.ema_fast > new.ema_slow
        and new.price > new.vwap
        and new.rsi < genome.rsi_threshold
        and new.momentum > 0.0
        and new.vol_ema > prev.vol_ema
        and new.price > new.fib_support
    )


def is_short(prev: IndicatorState, new: IndicatorState, genome: Genome) -> bool:
    return (
        new.ema_fast < new.ema_slow
        and new.price < new.vwap
        and new.rsi > 100.0 - genome.rsi_threshold
        and new.momentum < 0.0
        and new.vol_ema < prev.vol_ema
        and new.price < new.fib_resistance
    )


def classify(
    prev: IndicatorState,
    new: IndicatorState,
    genome: Genome,
    time_index: float = 0.0,
) -> Signal | None:
    """
    Classify one step of the recurrence.

    Args:
        prev: State before the step
        new: State after the step
        genome: Thresholds to apply
        time_index: Step index recorded on the signal

    Returns:
        Signal captured from ``new``, or None
    """
    if is_long(prev, new, genome):
        return Signal.from_state(Direction.LONG, time_index, new)
    if is_short(prev, new, genome):
        return Signal.from_state(Direction.SHORT, time_index, new)
    return None
