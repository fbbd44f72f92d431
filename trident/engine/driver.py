"""Sequence driver: folds the recurrence and classifier over observations.

Processing order for each observation:
1. Normalize it through the variant's adapter
2. Advance the state, using the previous state's projected price as
   the previous close
3. Classify the step against the previous state
4. Advance the time index by exactly 1.0

The seed state is built from the first observation, which is then
folded like every other one (it can never signal: both EMAs still
equal the seed price).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from trident.adapters import ObservationAdapter
from trident.engine.classifier import classify
from trident.engine.recurrence import advance
from trident.engine.variants import Variant, get_variant
from trident.models.genome import Genome
from trident.models.signal import Direction, Signal
from trident.models.state import IndicatorState, VwapAccumulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of folding one observation."""

    time_index: float
    state: IndicatorState
    signal: Signal | None = None


@dataclass
class EngineRun:
    """Full trace of one run: every state and every emitted signal."""

    states: list[IndicatorState] = field(default_factory=list)
    signals: list[Signal] = field(default_factory=list)

    @property
    def final_state(self) -> IndicatorState | None:
        return self.states[-1] if self.states else None

    @property
    def long_count(self) -> int:
        return sum(1 for s in self.signals if s.direction == Direction.LONG)

    @property
    def short_count(self) -> int:
        return sum(1 for s in self.signals if s.direction == Direction.SHORT)


class SignalEngine:
    """Stateless-between-runs driver for one genome and one variant.

    Each call to ``steps``, ``trace`` or ``run`` starts from a fresh seed
    and resets the adapter, so the same input always yields the same
    output. Do not interleave two ``steps`` generators of one engine:
    they share the adapter.
    """

    def __init__(
        self,
        genome: Genome | None = None,
        variant: str | Variant = "bar",
        adapter: ObservationAdapter | None = None,
    ):
        self.variant = get_variant(variant) if isinstance(variant, str) else variant
        self.genome = genome if genome is not None else self.variant.genome
        if adapter is None:
            adapter = self.variant.new_adapter()
        self.adapter = adapter

    def steps(self, observations: Iterable) -> Iterator[StepResult]:
        """Lazily fold observations, yielding one StepResult per input."""
        self.adapter.reset()
        coefficients = self.variant.coefficients
        state: IndicatorState | None = None
        vwap_acc = VwapAccumulator()
        time_index = 0.0

        for observation in observations:
            point = self.adapter.adapt(observation)
            if state is None:
                state = IndicatorState.seed(point.price)

            new_state, vwap_acc = advance(
                self.genome, state, point, state.price, vwap_acc, coefficients
            )
            signal = classify(state, new_state, self.genome, time_index)
            if signal is not None:
                logger.debug("%s", signal.describe())

            yield StepResult(time_index=time_index, state=new_state, signal=signal)
            state = new_state
            time_index += 1.0

    def trace(self, observations: Iterable) -> EngineRun:
        """Run to completion, keeping every intermediate state."""
        result = EngineRun()
        for step in self.steps(observations):
            result.states.append(step.state)
            if step.signal is not None:
                result.signals.append(step.signal)

        logger.info(
            "%s run: %d observations, %d signals (%d long, %d short)",
            self.variant.name,
            len(result.states),
            len(result.signals),
            result.long_count,
            result.short_count,
        )
        return result

    def run(self, observations: Iterable) -> list[Signal]:
        """Run to completion and return the emitted signals in order."""
        return self.trace(observations).signals


def run_signals(
    observations: Iterable,
    genome: Genome | None = None,
    variant: str | Variant = "bar",
) -> list[Signal]:
    """Fold ``observations`` and return their signals.

    Args:
        observations: Ordered bars or ticks (matching ``variant``)
        genome: Coefficients to use (defaults to the variant's preset)
        variant: Registered variant name or Variant

    Returns:
        Signals in arrival order (empty for empty input)
    """
    return SignalEngine(genome=genome, variant=variant).run(observations)
