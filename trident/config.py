"""Engine configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from trident.adapters import DEFAULT_RANGE_WINDOW
from trident.engine import SignalEngine, get_variant
from trident.genome_config import load_genome


class EngineSettings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRIDENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input variant: "bar", "tick" or any registered name
    variant: str = "bar"

    # Optional YAML genome; the variant's genome is used when unset
    genome_file: Path | None = None

    # How ticks get a high/low (ignored for bars)
    tick_range_policy: Literal["rolling", "spread"] = "rolling"
    tick_range_window: int = DEFAULT_RANGE_WINDOW


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()


def build_engine(settings: EngineSettings | None = None) -> SignalEngine:
    """Build a SignalEngine from settings (cached environment settings by default)."""
    if settings is None:
        settings = get_settings()
    variant = get_variant(settings.variant)

    if settings.genome_file is not None:
        genome = load_genome(settings.genome_file, default=variant.genome)
    else:
        genome = variant.genome

    adapter = variant.new_adapter(
        range_policy=settings.tick_range_policy,
        range_window=settings.tick_range_window,
    )
    return SignalEngine(genome=genome, variant=variant, adapter=adapter)
