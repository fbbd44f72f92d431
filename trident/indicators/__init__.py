"""Technical indicators (pure math, no I/O)."""

from trident.indicators.indicators import (
    RS_SENTINEL,
    ema_delta,
    blend,
    rsi,
    vwap_step,
    true_range,
    volatility_step,
    fibonacci_levels,
    fitness,
)

__all__ = [
    "RS_SENTINEL",
    "ema_delta",
    "blend",
    "rsi",
    "vwap_step",
    "true_range",
    "volatility_step",
    "fibonacci_levels",
    "fitness",
]
