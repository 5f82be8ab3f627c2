"""Fit metrics over a model table's residuals.

Only rows with a defined error count; undefined residuals are ignored.
"""

from __future__ import annotations

import numpy as np
import pandas as pd


def _defined(values) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    return values[np.isfinite(values)]


def sse(errors) -> float:
    """Sum of squared errors."""
    errors = _defined(errors)
    return float(np.sum(errors**2))


def mse(errors) -> float:
    """Mean squared error, 0.0 for no defined errors."""
    errors = _defined(errors)
    if errors.size == 0:
        return 0.0
    return float(np.mean(errors**2))


def rmse(errors) -> float:
    return float(np.sqrt(mse(errors)))


def mae(errors) -> float:
    """Mean absolute error, 0.0 for no defined errors."""
    errors = _defined(errors)
    if errors.size == 0:
        return 0.0
    return float(np.mean(np.abs(errors)))


def mape(y_true, y_pred) -> float:
    """Mean absolute percentage error (0-1 scale).

    Periods with a zero actual are skipped.

    Raises:
        ValueError: If no period has a non-zero actual
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    mask = np.isfinite(y_true) & np.isfinite(y_pred) & (y_true != 0)
    if not np.any(mask):
        raise ValueError("Cannot compute MAPE: no non-zero actuals")
    return float(np.mean(np.abs((y_true[mask] - y_pred[mask]) / y_true[mask])))


def fit_metrics(model_table: pd.DataFrame) -> dict[str, float]:
    """Summarize residuals of a model table.

    Returns an empty dict for an empty table.
    """
    if len(model_table) == 0 or "error" not in model_table.columns:
        return {}
    errors = model_table["error"]
    metrics = {
        "n": float(_defined(errors).size),
        "sse": sse(errors),
        "mse": mse(errors),
        "rmse": rmse(errors),
        "mae": mae(errors),
    }
    try:
        metrics["mape"] = mape(model_table["value"], model_table["t_plus_seasonal"])
    except ValueError:
        pass
    return metrics


__all__ = ["sse", "mse", "rmse", "mae", "mape", "fit_metrics"]
