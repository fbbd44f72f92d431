"""pandas conversions for engine inputs and outputs.

Observation frames are read column-wise into Bar / Tick records; state
traces and signals are written back as float64 frames for analysis.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import pandas as pd

from trident.models.observation import Bar, Tick
from trident.models.signal import Signal
from trident.models.state import STATE_FIELDS, IndicatorState

logger = logging.getLogger(__name__)

BAR_COLUMNS = ("open", "high", "low", "close", "volume")
TICK_COLUMNS = ("bid", "ask", "last", "volume", "timestamp")
SIGNAL_COLUMNS = (
    "direction",
    "time_index",
    "price",
    "take_profit",
    "stop_loss",
    "fitness",
)


def _require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"frame is missing columns: {', '.join(missing)}")


def bars_from_frame(df: pd.DataFrame) -> list[Bar]:
    """Build bars from a frame with open/high/low/close/volume columns.

    An optional ``timestamp`` column is carried onto each bar.
    """
    _require_columns(df, BAR_COLUMNS)
    values = df.loc[:, list(BAR_COLUMNS)].to_numpy(dtype=np.float64)
    if "timestamp" in df.columns:
        timestamps = df["timestamp"].astype(float).tolist()
    else:
        timestamps = [None] * len(df)

    bars = [
        Bar(
            open=float(o),
            high=float(h),
            low=float(l),
            close=float(c),
            volume=float(v),
            timestamp=ts,
        )
        for (o, h, l, c, v), ts in zip(values, timestamps)
    ]
    logger.debug("Loaded %d bars from frame", len(bars))
    return bars


def ticks_from_frame(df: pd.DataFrame) -> list[Tick]:
    """Build ticks from a frame with bid/ask/last/volume/timestamp columns."""
    _require_columns(df, TICK_COLUMNS)
    values = df.loc[:, list(TICK_COLUMNS)].to_numpy(dtype=np.float64)
    ticks = [
        Tick(
            bid=float(b),
            ask=float(a),
            last=float(p),
            volume=float(v),
            timestamp=float(ts),
        )
        for b, a, p, v, ts in values
    ]
    logger.debug("Loaded %d ticks from frame", len(ticks))
    return ticks


def states_to_frame(states: Iterable[IndicatorState]) -> pd.DataFrame:
    """One row per state, one float64 column per state field."""
    rows = [s.to_dict() for s in states]
    return pd.DataFrame(rows, columns=list(STATE_FIELDS), dtype=np.float64)


def signals_to_frame(signals: Iterable[Signal]) -> pd.DataFrame:
    """One row per signal; ``direction`` is written as "LONG" / "SHORT"."""
    rows = [
        {
            "direction": s.direction.name,
            "time_index": s.time_index,
            "price": s.price,
            "take_profit": s.take_profit,
            "stop_loss": s.stop_loss,
            "fitness": s.fitness,
        }
        for s in signals
    ]
    return pd.DataFrame(rows, columns=list(SIGNAL_COLUMNS))
