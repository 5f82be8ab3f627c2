"""Seasonal convention shared by every stage.

Additive indices are offsets around 0 and are added or subtracted.
Multiplicative indices are ratios around 1 and are multiplied or divided.
Extraction, model reconstruction and forecasting all go through the helpers
here, so the convention cannot drift between stages.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from decompcast.core.config import MODELS


def check_model(model: str) -> str:
    if model not in MODELS:
        raise ValueError(f"model must be one of {MODELS}, got {model!r}")
    return model


def neutral_index(model: str) -> float:
    """Index value that leaves a series unchanged under ``model``."""
    return 0.0 if check_model(model) == "additive" else 1.0


def phases(periods: pd.Series | np.ndarray, season_length: int) -> np.ndarray:
    """Position of each 1-based period within its cycle: (period - 1) mod L."""
    return (np.asarray(periods, dtype=int) - 1) % season_length


def combine(trend, seasonal, model: str):
    """Recombine trend with a seasonal index."""
    if check_model(model) == "additive":
        return trend + seasonal
    return trend * seasonal


def remove(values: pd.Series, seasonal: pd.Series, model: str) -> pd.Series:
    """Remove a seasonal index from values.

    A zero multiplicative index leaves the value unchanged.
    """
    if check_model(model) == "additive":
        return values - seasonal
    return (values / seasonal.where(seasonal != 0)).fillna(values)
