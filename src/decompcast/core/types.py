"""Shared column names for decompcast tables.

Each stage adds columns to the table it receives; the tuples below list the
columns a stage contributes, in output order. Undefined cells are NaN.
"""

from __future__ import annotations

PERIOD = "period"
VALUE = "value"
CENTERED_MOVING_AVERAGE = "centered_moving_average"
ADJUSTED_SEASONAL_COMPONENT = "adjusted_seasonal_component"
DESEASONALIZED = "deseasonalized"

SERIES_COLUMNS = (PERIOD, VALUE)

SMOOTHER_COLUMNS = (
    "moving_average",
    CENTERED_MOVING_AVERAGE,
    "deviation_from_moving_average",
)

MODEL_COLUMNS = (
    "trend",
    "seasonal",
    "t_plus_seasonal",
    "error",
    "error_squared",
)

FORECAST_COLUMNS = (PERIOD, VALUE, "forecast", "trend", "seasonal")

__all__ = [
    "PERIOD",
    "VALUE",
    "CENTERED_MOVING_AVERAGE",
    "ADJUSTED_SEASONAL_COMPONENT",
    "DESEASONALIZED",
    "SERIES_COLUMNS",
    "SMOOTHER_COLUMNS",
    "MODEL_COLUMNS",
    "FORECAST_COLUMNS",
]
