"""Genome (tunable coefficient) configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Genome(BaseModel):
    """Static bundle of tunable coefficients for one engine run.

    Values are not range checked. Out-of-range coefficients are accepted
    and simply change the dynamics of the recurrence.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Exponential smoothing factors, expected in (0, 1]
    alpha_fast: float
    alpha_slow: float

    # RSI threshold for LONG; SHORT uses 100 - rsi_threshold
    rsi_threshold: float

    # TP/SL multipliers (based on ATR)
    take_profit_mult: float
    stop_loss_mult: float

    # Fibonacci band ratios, expected in [0, 1]
    fib_ratio1: float
    fib_ratio2: float

    reward_risk_weight: float

    # Acceleration / jerk smoothing, expected in (0, 1]
    ode_accel_coeff: float
    ode_jerk_coeff: float

    def with_overrides(self, **overrides: float) -> Genome:
        """Return a copy with some coefficients replaced (validated)."""
        data = self.model_dump()
        data.update(overrides)
        return Genome(**data)


# =============================================================================
# Bar preset: 10/50 EMA pair, 38.2% / 61.8% retracement band
# =============================================================================
DEFAULT_BAR_GENOME = Genome(
    alpha_fast=2.0 / 10.0,
    alpha_slow=2.0 / 50.0,
    rsi_threshold=30.0,
    take_profit_mult=2.0,
    stop_loss_mult=1.0,
    fib_ratio1=0.382,
    fib_ratio2=0.618,
    reward_risk_weight=1.5,
    ode_accel_coeff=0.1,
    ode_jerk_coeff=0.01,
)

# =============================================================================
# Tick preset: faster 5/21 EMA pair, tighter stops, 23.6% / 76.4% band
# =============================================================================
DEFAULT_TICK_GENOME = Genome(
    alpha_fast=2.0 / 5.0,
    alpha_slow=2.0 / 21.0,
    rsi_threshold=25.0,
    take_profit_mult=1.5,
    stop_loss_mult=0.75,
    fib_ratio1=0.236,
    fib_ratio2=0.764,
    reward_risk_weight=2.0,
    ode_accel_coeff=0.15,
    ode_jerk_coeff=0.02,
)

default_genome = DEFAULT_BAR_GENOME

GENOME_PRESETS: dict[str, Genome] = {
    "bar": DEFAULT_BAR_GENOME,
    "tick": DEFAULT_TICK_GENOME,
}
