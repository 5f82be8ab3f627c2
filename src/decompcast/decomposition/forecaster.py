"""Forward extrapolation of trend and seasonal index."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from decompcast.core.types import FORECAST_COLUMNS
from decompcast.decomposition.convention import check_model, combine

logger = logging.getLogger(__name__)


def empty_forecast() -> pd.DataFrame:
    return pd.DataFrame(columns=list(FORECAST_COLUMNS))


def forecast(
    slope: float,
    intercept: float,
    seasonal_index: Sequence[float] | np.ndarray,
    last_period: int,
    horizon: int,
    model: str = "additive",
    include_boundary: bool = False,
    last_value: float | None = None,
) -> pd.DataFrame:
    """Forecast periods ``last_period + 1 .. last_period + horizon``.

    The seasonal index for period p is ``seasonal_index[(p - 1) % L]`` where
    L is the length of ``seasonal_index``.

    Args:
        slope: Trend slope
        intercept: Trend intercept
        seasonal_index: Phase-indexed adjusted seasonal indices
        last_period: Last observed period
        horizon: Number of future periods
        model: 'additive' or 'multiplicative'
        include_boundary: Prefix a row at ``last_period`` so plotted
            history and forecast lines connect
        last_value: Observed value at ``last_period`` for the boundary row

    Returns:
        DataFrame [period, value, forecast, trend, seasonal]. Future rows
        have no value. Empty when horizon is 0 or no index is available.
    """
    check_model(model)
    if horizon < 0:
        raise ValueError(f"horizon must be non-negative, got {horizon}")
    index = np.asarray(seasonal_index, dtype=float)
    if horizon == 0 or index.size == 0:
        logger.debug("Forecast skipped: horizon=%d, %d seasonal indices", horizon, index.size)
        return empty_forecast()

    first = last_period if include_boundary else last_period + 1
    periods = np.arange(first, last_period + horizon + 1, dtype=int)
    trend = slope * periods + intercept
    seasonal = index[(periods - 1) % index.size]

    values = np.full(periods.size, np.nan)
    if include_boundary and last_value is not None:
        values[0] = last_value

    logger.debug("Forecast: periods %d..%d (%s)", periods[0], periods[-1], model)
    return pd.DataFrame({
        "period": periods,
        "value": values,
        "forecast": combine(trend, seasonal, model),
        "trend": trend,
        "seasonal": seasonal,
    })
