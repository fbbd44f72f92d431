"""Indicator recurrence: one step of the state ODE system.

``advance`` maps ``(state, point, prev_close, vwap_acc)`` to the next
``(state, vwap_acc)``. It combines exponential smoothing, RSI, ATR, a
smoothed finite-difference estimate of price acceleration and jerk,
and a velocity term damped toward the fast EMA and the VWAP.

This module is pure business logic with no I/O dependencies.
"""

from dataclasses import dataclass

from trident.indicators import (
    blend,
    ema_delta,
    fibonacci_levels,
    fitness,
    rsi,
    true_range,
    volatility_step,
    vwap_step,
)
from trident.models.genome import Genome
from trident.models.observation import MarketPoint
from trident.models.state import IndicatorState, VwapAccumulator

# Velocity pull toward the previous fast EMA / VWAP, and the weight of the
# volatility change correction.
EMA_SPRING = 0.1
VWAP_SPRING = 0.05
VOLATILITY_CORRECTION = 0.01


@dataclass(frozen=True, slots=True)
class VariantCoefficients:
    """Fixed smoothing constants that differ between input variants.

    Attributes:
        gain_loss_blend: Blend factor for gain, loss and true range.
        atr_smoothing: EMA factor of ATR over the smoothed true range.
        vol_smoothing: EMA factor of volume and squared price change.
    """

    gain_loss_blend: float
    atr_smoothing: float
    vol_smoothing: float


BAR_COEFFICIENTS = VariantCoefficients(
    gain_loss_blend=0.1,
    atr_smoothing=2.0 / 15.0,
    vol_smoothing=2.0 / 21.0,
)

# Higher-frequency input reacts faster
TICK_COEFFICIENTS = VariantCoefficients(
    gain_loss_blend=0.2,
    atr_smoothing=2.0 / 9.0,
    vol_smoothing=2.0 / 13.0,
)


def advance(
    genome: Genome,
    state: IndicatorState,
    point: MarketPoint,
    prev_close: float,
    vwap_acc: VwapAccumulator,
    coefficients: VariantCoefficients = BAR_COEFFICIENTS,
) -> tuple[IndicatorState, VwapAccumulator]:
    """
    Advance the indicator state by one observation.

    Args:
        genome: Tunable coefficients for this run
        state: State after the previous observation
        point: Normalized observation
        prev_close: Previous state's projected price
        vwap_acc: Running VWAP sums
        coefficients: Variant smoothing constants

    Returns:
        Tuple of (new state, new VWAP sums)
    """
    price = point.price
    k = coefficients.gain_loss_blend

    ema_fast = state.ema_fast + ema_delta(genome.alpha_fast, state.ema_fast, price)
    ema_slow = state.ema_slow + ema_delta(genome.alpha_slow, state.ema_slow, price)

    vwap, cum_pv, cum_vol = vwap_step(
        vwap_acc.cumulative_price_volume,
        vwap_acc.cumulative_volume,
        price,
        point.volume,
    )

    delta = price - prev_close
    gain = blend(k, delta if delta > 0.0 else 0.0, state.gain)
    loss = blend(k, -delta if delta < 0.0 else 0.0, state.loss)
    new_rsi, rs = rsi(gain, loss)

    tr = blend(k, true_range(prev_close, point.high, point.low), state.tr)
    atr = blend(coefficients.atr_smoothing, tr, state.atr)

    vol_ema = state.vol_ema + ema_delta(
        coefficients.vol_smoothing, state.vol_ema, point.volume
    )
    volatility = volatility_step(
        state.price_volatility, delta, coefficients.vol_smoothing
    )

    acceleration = blend(
        genome.ode_accel_coeff, delta - state.dprice_dt, state.acceleration
    )
    jerk = blend(
        genome.ode_jerk_coeff, acceleration - state.acceleration, state.jerk
    )

    velocity = (
        state.dprice_dt
        + acceleration
        + EMA_SPRING * (state.ema_fast - price)
        + VWAP_SPRING * (state.vwap - price)
        + VOLATILITY_CORRECTION * (volatility - state.price_volatility)
    )

    # TP/SL and fitness use the observed price, not the projected one
    take_profit = price + genome.take_profit_mult * atr
    stop_loss = price - genome.stop_loss_mult * atr
    fib_support, fib_resistance = fibonacci_levels(
        point.high, point.low, genome.fib_ratio1, genome.fib_ratio2
    )
    score = fitness(
        take_profit - price, price - stop_loss, genome.reward_risk_weight
    )

    new_state = IndicatorState(
        ema_fast=ema_fast,
        ema_slow=ema_slow,
        vwap=vwap,
        price=price + state.dprice_dt,
        momentum=velocity,
        rsi=new_rsi,
        atr=atr,
        dprice_dt=velocity,
        gain=gain,
        loss=loss,
        tr=tr,
        rs=rs,
        vol_ema=vol_ema,
        price_volatility=volatility,
        take_profit=take_profit,
        stop_loss=stop_loss,
        fitness=score,
        fib_support=fib_support,
        fib_resistance=fib_resistance,
        acceleration=acceleration,
        jerk=jerk,
    )
    return new_state, VwapAccumulator(cum_pv, cum_vol)
