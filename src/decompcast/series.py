"""Observation series construction and validation.

The core stages assume a clean series: periods 1..N in insertion order and
finite numeric values. These helpers are where raw entries get rejected.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
import pandas as pd

from decompcast.core.errors import EContract
from decompcast.core.types import PERIOD, SERIES_COLUMNS, VALUE


def parse_value(text: str) -> float:
    """Parse a single user entry into an observation value.

    Raises:
        EContract: If the entry is not a finite number
    """
    try:
        value = float(str(text).strip())
    except ValueError as exc:
        raise EContract(
            f"Cannot parse observation value: {text!r}",
            fix_hint="Enter a plain number such as 120 or 98.5",
        ) from exc
    if not math.isfinite(value):
        raise EContract(f"Observation value must be finite, got {text!r}")
    return value


def from_values(values: Iterable[float]) -> pd.DataFrame:
    """Build a series with periods 1..N from plain values."""
    values = [float(v) for v in values]
    df = pd.DataFrame({
        PERIOD: np.arange(1, len(values) + 1, dtype=int),
        VALUE: np.asarray(values, dtype=float),
    })
    return validate_series(df)


def append_observation(series: pd.DataFrame, value: float) -> pd.DataFrame:
    """Return a new series with ``value`` at the next sequential period."""
    if not math.isfinite(value):
        raise EContract(f"Observation value must be finite, got {value!r}")
    next_period = len(series) + 1
    row = pd.DataFrame({PERIOD: [next_period], VALUE: [float(value)]})
    if len(series) == 0:
        return validate_series(row)
    return pd.concat([series[list(SERIES_COLUMNS)], row], ignore_index=True)


def validate_series(series: pd.DataFrame) -> pd.DataFrame:
    """Check the observation contract and return a normalized copy.

    Extra columns are dropped. Periods must equal 1..N in row order.

    Raises:
        EContract: On missing columns, out-of-order periods or bad values
    """
    missing = [c for c in SERIES_COLUMNS if c not in series.columns]
    if missing:
        raise EContract(
            f"Missing required columns: {missing}",
            context={"required": list(SERIES_COLUMNS), "found": list(series.columns)},
        )

    df = series[list(SERIES_COLUMNS)].reset_index(drop=True)

    try:
        values = pd.to_numeric(df[VALUE]).astype(float)
    except (TypeError, ValueError) as exc:
        raise EContract("Column 'value' must be numeric") from exc
    if not np.isfinite(values.to_numpy()).all():
        bad = int((~np.isfinite(values.to_numpy())).sum())
        raise EContract(
            f"Column 'value' has {bad} non-finite values",
            fix_hint="Reject unparsable or missing entries before building the series",
        )

    expected = np.arange(1, len(df) + 1)
    periods = df[PERIOD].to_numpy()
    if len(df) and not np.array_equal(periods, expected):
        raise EContract(
            "Periods must be contiguous integers starting at 1 in insertion order",
            context={"first_periods": periods[:5].tolist()},
            fix_hint="Use from_values() or append_observation() to assign periods",
        )

    return pd.DataFrame({PERIOD: expected.astype(int), VALUE: values.to_numpy()})


__all__ = ["parse_value", "from_values", "append_observation", "validate_series"]
