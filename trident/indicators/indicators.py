"""Incremental technical indicators.

Each function advances one indicator by a single observation. They are
pure float functions with no history buffers: the caller threads the
previous value through. Together they form the building blocks of the
state recurrence in ``trident.engine.recurrence``.
"""

# Relative strength used when the smoothed loss is exactly zero
RS_SENTINEL = 1000.0


def ema_delta(alpha: float, ema: float, price: float) -> float:
    """
    Euler step of the relaxation ODE ``dEMA/dt = alpha * (price - EMA)``.

    Args:
        alpha: Smoothing factor
        ema: Current EMA value
        price: New observation

    Returns:
        The increment to add to ``ema``
    """
    return alpha * (price - ema)


def blend(weight: float, value: float, previous: float) -> float:
    """Exponential blend ``weight * value + (1 - weight) * previous``."""
    return weight * value + (1.0 - weight) * previous


def rsi(gain: float, loss: float) -> tuple[float, float]:
    """
    Calculate RSI from smoothed average gain and loss.

    A zero loss short-circuits to ``RS_SENTINEL`` instead of dividing,
    so the result stays finite.

    Args:
        gain: Smoothed average gain (non-negative)
        loss: Smoothed average loss (non-negative)

    Returns:
        Tuple of (rsi, rs)
    """
    rs = RS_SENTINEL if loss == 0.0 else gain / loss
    return 100.0 - 100.0 / (1.0 + rs), rs


def vwap_step(
    cum_pv: float,
    cum_vol: float,
    price: float,
    volume: float,
) -> tuple[float, float, float]:
    """
    Add one observation to the running VWAP sums.

    Note: This is a cumulative VWAP that never resets. While the
    cumulative volume is still zero the VWAP falls back to ``price``.

    Returns:
        Tuple of (vwap, cum_pv, cum_vol)
    """
    new_cum_pv = cum_pv + price * volume
    new_cum_vol = cum_vol + volume
    if new_cum_vol == 0.0:
        return price, new_cum_pv, new_cum_vol
    return new_cum_pv / new_cum_vol, new_cum_pv, new_cum_vol


def true_range(prev_close: float, high: float, low: float) -> float:
    """
    Calculate True Range for one observation.

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))
    """
    return max(high - low, abs(high - prev_close), abs(low - prev_close))


def volatility_step(prev_volatility: float, delta: float, alpha: float) -> float:
    """EMA of the squared price change (instantaneous variance estimate)."""
    return alpha * (delta * delta) + (1.0 - alpha) * prev_volatility


def fibonacci_levels(
    high: float,
    low: float,
    ratio1: float,
    ratio2: float,
) -> tuple[float, float]:
    """
    Calculate the Fibonacci retracement band of one high/low range.

    support = low + (high - low) * ratio1
    resistance = high - (high - low) * ratio2

    Returns:
        Tuple of (support, resistance)
    """
    diff = high - low
    return low + ratio1 * diff, high - ratio2 * diff


def fitness(reward: float, risk: float, weight: float) -> float:
    """
    Weighted reward/risk ratio.

    A zero risk falls back to the weighted reward instead of dividing.
    """
    if risk == 0.0:
        return reward * weight
    return reward / risk * weight
