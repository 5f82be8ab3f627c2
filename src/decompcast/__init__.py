"""decompcast - Classical decomposition forecasting.

Moving-average smoothing, seasonal index extraction, least-squares trend and
forward forecasting for a univariate, equally spaced series.

Input contract:
    A DataFrame with columns [period, value], periods 1..N, finite values.
    ``from_values`` builds one from plain numbers.

Basic usage:
    >>> from decompcast import decompose
    >>> result = decompose([100, 120, 140, 160, 110, 130, 150, 170], horizon=4)
    >>> print(result.forecast)

Stage by stage:
    >>> from decompcast import smooth, extract_seasonal, fit_and_model, forecast, seasonal_index
    >>> table = extract_seasonal(smooth(series), model="additive")
    >>> slope, intercept, model_table = fit_and_model(table, model="additive")
    >>> future = forecast(slope, intercept, seasonal_index(model_table), 8, 4)
"""

__version__ = "0.3.0"

from decompcast.core.config import DecompositionConfig
from decompcast.core.errors import DecompCastError, EContract, EDegenerateFit
from decompcast.core.results import DecompositionResult
from decompcast.decomposition import (
    extract_seasonal,
    fit_and_model,
    fit_trend,
    forecast,
    seasonal_index,
    smooth,
)
from decompcast.pipeline import decompose, run_pipeline
from decompcast.series import append_observation, from_values, parse_value, validate_series

__all__ = [
    "__version__",
    # Pipeline
    "decompose",
    "run_pipeline",
    "DecompositionConfig",
    "DecompositionResult",
    # Stages
    "smooth",
    "extract_seasonal",
    "seasonal_index",
    "fit_trend",
    "fit_and_model",
    "forecast",
    # Series
    "from_values",
    "append_observation",
    "parse_value",
    "validate_series",
    # Errors
    "DecompCastError",
    "EContract",
    "EDegenerateFit",
]
