"""Genome configuration loaded from a YAML file.

Supports:
- Preset selection: "bar" or "tick"
- Per-coefficient overrides on top of the preset
- No preset key = overrides apply to the selected variant's genome
- Backward compatible: no YAML file = the selected variant's genome

Example::

    preset: tick
    overrides:
      rsi_threshold: 20
      stop_loss_mult: 0.5
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, model_validator

from trident.models.genome import DEFAULT_BAR_GENOME, GENOME_PRESETS, Genome

logger = logging.getLogger(__name__)


class GenomeFile(BaseModel):
    """Top-level genome YAML document."""

    model_config = ConfigDict(extra="forbid")

    preset: str | None = None
    overrides: dict[str, float] = {}

    @model_validator(mode="after")
    def _validate(self):
        if self.preset is not None and self.preset not in GENOME_PRESETS:
            raise ValueError(
                f"preset must be one of {tuple(GENOME_PRESETS)}, got '{self.preset}'"
            )
        unknown = set(self.overrides) - set(Genome.model_fields)
        if unknown:
            raise ValueError(f"unknown genome fields: {', '.join(sorted(unknown))}")
        return self

    def to_genome(self, default: Genome = DEFAULT_BAR_GENOME) -> Genome:
        """Resolve to a Genome; ``default`` is the base when no preset is named."""
        base = GENOME_PRESETS[self.preset] if self.preset is not None else default
        if not self.overrides:
            return base
        return base.with_overrides(**self.overrides)


def load_genome(path: Path, default: Genome = DEFAULT_BAR_GENOME) -> Genome:
    """Load a genome from a YAML file.

    Falls back to ``default`` if the file doesn't exist. A document
    without a ``preset`` key applies its overrides to ``default``.
    """
    if not path.exists():
        logger.info("No genome file found at %s, using the default genome", path)
        return default

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    doc = GenomeFile(**raw)
    logger.info(
        "Loaded genome from %s: preset=%s, %d overrides",
        path,
        doc.preset or "(variant default)",
        len(doc.overrides),
    )
    return doc.to_genome(default)
