"""Indicator recurrence, signal classifier and sequence driver.

Public API:
- advance: One step of the indicator recurrence
- classify / is_long / is_short: Signal rules over two adjacent states
- SignalEngine / run_signals: Fold a sequence of observations
- register_variant / get_variant / list_variants: Variant registry

Importing this package registers the built-in ``bar`` and ``tick``
variants.
"""

from trident.engine.recurrence import (
    BAR_COEFFICIENTS,
    TICK_COEFFICIENTS,
    VariantCoefficients,
    advance,
)
from trident.engine.classifier import classify, is_long, is_short
from trident.engine.variants import (
    BAR_VARIANT,
    TICK_VARIANT,
    Variant,
    get_variant,
    list_variants,
    register_variant,
)
from trident.engine.driver import EngineRun, SignalEngine, StepResult, run_signals

__all__ = [
    "BAR_COEFFICIENTS",
    "TICK_COEFFICIENTS",
    "VariantCoefficients",
    "advance",
    "classify",
    "is_long",
    "is_short",
    "BAR_VARIANT",
    "TICK_VARIANT",
    "Variant",
    "get_variant",
    "list_variants",
    "register_variant",
    "EngineRun",
    "SignalEngine",
    "StepResult",
    "run_signals",
]
