"""Pipeline runner - functional composition of the four stages.

There is no incremental recomputation: any change to the series, the model
or the horizon is handled by calling ``run_pipeline`` again.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

import pandas as pd

from decompcast.core.config import DecompositionConfig, Model
from decompcast.core.results import DecompositionResult
from decompcast.pipeline.stages import (
    forecast_stage,
    model_stage,
    seasonal_stage,
    smooth_stage,
    validate_stage,
)
from decompcast.series import from_values

logger = logging.getLogger(__name__)


def run_pipeline(series: pd.DataFrame, config: DecompositionConfig) -> DecompositionResult:
    """Run Smoother -> Seasonal Extractor -> Trend Model -> Forecaster.

    Args:
        series: DataFrame with [period, value], periods 1..N
        config: Decomposition configuration

    Returns:
        DecompositionResult holding every stage table

    Raises:
        EContract: If the series violates the observation contract
    """
    start_time = time.time()

    series = validate_stage(series, config)
    smoothed = smooth_stage(series, config)
    seasonal = seasonal_stage(smoothed, config)
    slope, intercept, model_table, index = model_stage(seasonal, config)
    future = forecast_stage(slope, intercept, index, model_table, config)

    duration_ms = (time.time() - start_time) * 1000
    if len(model_table) == 0:
        logger.info(
            "Decomposition produced no model: %d observations (season_length=%d)",
            len(series),
            config.season_length,
        )
    else:
        logger.info(
            "Decomposed %d observations (%s): slope=%.4g intercept=%.4g, %d forecast rows in %.1f ms",
            len(series),
            config.model,
            slope,
            intercept,
            len(future),
            duration_ms,
        )

    return DecompositionResult(
        smoothed=smoothed,
        seasonal=seasonal,
        model=model_table,
        forecast=future,
        slope=slope,
        intercept=intercept,
        seasonal_index=index,
        config=config,
        duration_ms=duration_ms,
    )


def decompose(
    values: Iterable[float],
    horizon: int = 0,
    model: Model = "additive",
    **kwargs,
) -> DecompositionResult:
    """Single-entry-point decomposition and forecast.

    Args:
        values: Observed values, one per period starting at period 1
        horizon: Number of future periods to forecast
        model: 'additive' or 'multiplicative'
        **kwargs: Additional config options (season_length, normalization,
            include_boundary)

    Returns:
        DecompositionResult

    Examples:
        result = decompose([100, 120, 140, 160, 110, 130, 150, 170], horizon=4)
        print(result.forecast)
    """
    config = DecompositionConfig(horizon=horizon, model=model, **kwargs)
    return run_pipeline(from_values(values), config)
