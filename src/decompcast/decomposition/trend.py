"""Ordinary least-squares trend and model reconstruction."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from decompcast.core.errors import EDegenerateFit
from decompcast.core.types import (
    ADJUSTED_SEASONAL_COMPONENT as ADJUSTED,
    CENTERED_MOVING_AVERAGE as CMA,
    DESEASONALIZED,
    MODEL_COLUMNS,
    PERIOD,
    VALUE,
)
from decompcast.decomposition.convention import check_model, combine

logger = logging.getLogger(__name__)


def regression_target(table: pd.DataFrame) -> pd.Series:
    """Deseasonalized value where defined, else the CMA, else 0."""
    target = pd.Series(np.nan, index=table.index)
    if DESEASONALIZED in table.columns:
        target = table[DESEASONALIZED].astype(float)
    if CMA in table.columns:
        target = target.fillna(table[CMA])
    return target.fillna(0.0)


def fit_trend(table: pd.DataFrame) -> tuple[float, float]:
    """Fit ``y = slope * period + intercept`` over rows with a centered moving average.

    Returns:
        (slope, intercept), or (0.0, 0.0) when no row is eligible

    Raises:
        EDegenerateFit: If the denominator n*sum(x^2) - sum(x)^2 is zero
    """
    if CMA not in table.columns:
        return 0.0, 0.0
    eligible = table[table[CMA].notna()]
    n = len(eligible)
    if n == 0:
        return 0.0, 0.0

    x = eligible[PERIOD].to_numpy(dtype=float)
    y = regression_target(eligible).to_numpy(dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x * x).sum()

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise EDegenerateFit(
            "Cannot fit trend: all eligible rows share one period",
            context={"n": n, "periods": x.tolist()},
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def fit_and_model(
    table: pd.DataFrame, model: str = "additive"
) -> tuple[float, float, pd.DataFrame]:
    """Fit the trend and reconstruct the fitted value for every period.

    Args:
        table: Seasonal extractor output
        model: 'additive' or 'multiplicative'

    Returns:
        (slope, intercept, table) where table adds trend, seasonal,
        t_plus_seasonal, error and error_squared. When the input carries no
        seasonal indices the result is (0.0, 0.0, empty table).
    """
    check_model(model)
    if ADJUSTED not in table.columns or table[ADJUSTED].isna().all():
        logger.debug("Trend model skipped: no seasonal indices")
        columns = list(table.columns) + [c for c in MODEL_COLUMNS if c not in table.columns]
        return 0.0, 0.0, pd.DataFrame(columns=columns)

    slope, intercept = fit_trend(table)
    trend = slope * table[PERIOD].astype(float) + intercept
    seasonal = table[ADJUSTED]
    fitted = combine(trend, seasonal, model)
    error = table[VALUE] - fitted

    logger.debug("Trend fit: slope=%.6g intercept=%.6g", slope, intercept)
    return slope, intercept, table.assign(
        trend=trend,
        seasonal=seasonal,
        t_plus_seasonal=fitted,
        error=error,
        error_squared=error * error,
    )
