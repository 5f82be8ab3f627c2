"""Pipeline stage definitions.

Each stage is a pure function of the previous stage's table and the run
config. Stages are composed in the runner in a strict dependency order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from decompcast.core.config import DecompositionConfig
from decompcast.decomposition import (
    extract_seasonal,
    fit_and_model,
    forecast,
    seasonal_index,
    smooth,
)
from decompcast.series import validate_series


@dataclass(frozen=True)
class PipelineStage:
    """A single pipeline stage.

    Each stage is a named function with clear input/output contracts.
    """

    name: str
    run: Callable[..., Any]


# =============================================================================
# Stage Implementations
# =============================================================================


def validate_stage(series: pd.DataFrame, config: DecompositionConfig) -> pd.DataFrame:
    """Check the observation contract."""
    return validate_series(series)


def smooth_stage(series: pd.DataFrame, config: DecompositionConfig) -> pd.DataFrame:
    return smooth(series, season_length=config.season_length)


def seasonal_stage(table: pd.DataFrame, config: DecompositionConfig) -> pd.DataFrame:
    return extract_seasonal(
        table,
        model=config.model,
        season_length=config.season_length,
        normalization=config.normalization,
    )


def model_stage(
    table: pd.DataFrame, config: DecompositionConfig
) -> tuple[float, float, pd.DataFrame, np.ndarray]:
    """Fit the trend and collect the phase-indexed seasonal index."""
    slope, intercept, model_table = fit_and_model(table, model=config.model)
    index = seasonal_index(model_table, config.season_length)
    return slope, intercept, model_table, index


def forecast_stage(
    slope: float,
    intercept: float,
    index: np.ndarray,
    model_table: pd.DataFrame,
    config: DecompositionConfig,
) -> pd.DataFrame:
    """Extrapolate past the last modelled period.

    Nothing is forecast until the model stage produced rows.
    """
    if len(model_table) == 0:
        return forecast(slope, intercept, [], 0, 0, model=config.model)
    last = model_table.iloc[-1]
    return forecast(
        slope,
        intercept,
        index,
        last_period=int(last["period"]),
        horizon=config.horizon,
        model=config.model,
        include_boundary=config.include_boundary,
        last_value=float(last["value"]),
    )


# =============================================================================
# Stage Registry
# =============================================================================

STAGES = [
    PipelineStage("validate", validate_stage),
    PipelineStage("smooth", smooth_stage),
    PipelineStage("seasonal", seasonal_stage),
    PipelineStage("model", model_stage),
    PipelineStage("forecast", forecast_stage),
]
