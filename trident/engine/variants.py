"""Variant registry for the bar-driven and tick-driven engines.

A variant bundles everything that differs between input types: the
smoothing coefficient table, the observation adapter and the preset
genome. The recurrence body itself is shared.

Usage:
    register_variant(Variant(name="my_variant", ...))

    variant = get_variant("tick")
    adapter = variant.new_adapter(range_policy="spread")
    variants = list_variants()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from trident.adapters import BarAdapter, ObservationAdapter, TickAdapter
from trident.engine.recurrence import (
    BAR_COEFFICIENTS,
    TICK_COEFFICIENTS,
    VariantCoefficients,
)
from trident.models.genome import DEFAULT_BAR_GENOME, DEFAULT_TICK_GENOME, Genome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variant:
    """Per-input-type engine parameters.

    ``adapter_factory`` is called with keyword options (``range_policy``,
    ``range_window``) and must accept and ignore the ones it has no use for.
    """

    name: str
    coefficients: VariantCoefficients
    adapter_factory: Callable[..., ObservationAdapter]
    genome: Genome

    def new_adapter(self, **options) -> ObservationAdapter:
        return self.adapter_factory(**options)


# Global registry: variant_name -> Variant
_REGISTRY: dict[str, Variant] = {}


def register_variant(variant: Variant) -> Variant:
    """Register a variant under its name.

    Raises:
        ValueError: If a variant with the same name is already registered.
    """
    if variant.name in _REGISTRY:
        raise ValueError(f"Variant '{variant.name}' is already registered")
    _REGISTRY[variant.name] = variant
    logger.debug("Registered variant: %s -> %s", variant.name, variant.coefficients)
    return variant


def get_variant(name: str) -> Variant:
    """Get a registered variant by name.

    Raises:
        KeyError: If no variant is registered under the given name.
    """
    variant = _REGISTRY.get(name)
    if variant is None:
        available = ", ".join(sorted(_REGISTRY.keys())) or "(none)"
        raise KeyError(f"Unknown variant '{name}'. Available: {available}")
    return variant


def list_variants() -> list[str]:
    """Return a sorted list of registered variant names."""
    return sorted(_REGISTRY.keys())


BAR_VARIANT = register_variant(
    Variant(
        name="bar",
        coefficients=BAR_COEFFICIENTS,
        adapter_factory=BarAdapter.from_options,
        genome=DEFAULT_BAR_GENOME,
    )
)

TICK_VARIANT = register_variant(
    Variant(
        name="tick",
        coefficients=TICK_COEFFICIENTS,
        adapter_factory=TickAdapter.from_options,
        genome=DEFAULT_TICK_GENOME,
    )
)
