"""Result container for a decomposition run.

Holds the latest output of every stage so a presentation layer can render
or export each table unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from decompcast.contracts import DecompositionPayload
    from decompcast.core.config import DecompositionConfig

SHEET_NAMES = ("Moving Average", "Seasonal Components", "Model", "Forecast")


@dataclass(frozen=True)
class DecompositionResult:
    """Output of all four stages plus the fitted trend."""

    smoothed: pd.DataFrame
    seasonal: pd.DataFrame
    model: pd.DataFrame
    forecast: pd.DataFrame
    slope: float
    intercept: float
    seasonal_index: np.ndarray
    config: DecompositionConfig
    duration_ms: float = 0.0

    @property
    def n_observations(self) -> int:
        return len(self.smoothed)

    @property
    def last_period(self) -> int:
        if len(self.smoothed) == 0:
            return 0
        return int(self.smoothed["period"].iloc[-1])

    @property
    def is_empty(self) -> bool:
        """True while too little data has accumulated to fit a model."""
        return len(self.model) == 0

    def tables(self) -> dict[str, pd.DataFrame]:
        """Stage tables keyed by export sheet name, in pipeline order."""
        return dict(zip(SHEET_NAMES, (self.smoothed, self.seasonal, self.model, self.forecast)))

    def chart_frame(self) -> pd.DataFrame:
        """Actual, model and forecast lines aligned by period.

        Columns: [period, actual, model, forecast]. Missing points are NaN.
        """
        actual = self.smoothed[["period", "value"]].rename(columns={"value": "actual"})
        if self.is_empty:
            fitted = pd.DataFrame({"period": pd.Series(dtype=int), "model": pd.Series(dtype=float)})
        else:
            fitted = self.model[["period", "t_plus_seasonal"]].rename(
                columns={"t_plus_seasonal": "model"}
            )
        future = self.forecast[["period", "forecast"]].astype({"period": int, "forecast": float})
        chart = actual.merge(fitted, on="period", how="left")
        chart = chart.merge(future, on="period", how="outer")
        return chart.sort_values("period").reset_index(drop=True)

    def summary(self) -> dict[str, Any]:
        """Human-readable summary of the run."""
        from decompcast.metrics import fit_metrics

        return {
            "model": self.config.model,
            "season_length": self.config.season_length,
            "n_observations": self.n_observations,
            "slope": round(self.slope, 6),
            "intercept": round(self.intercept, 6),
            "seasonal_index": [round(float(v), 6) for v in self.seasonal_index],
            "forecast_periods": int((self.forecast["period"] > self.last_period).sum())
            if len(self.forecast)
            else 0,
            "metrics": fit_metrics(self.model),
            "duration_ms": round(self.duration_ms, 2),
        }

    def to_payload(self) -> DecompositionPayload:
        """Serializable payload of this run."""
        import decompcast
        from decompcast.contracts import DecompositionPayload, ForecastRowPayload
        from decompcast.metrics import fit_metrics

        rows = [
            ForecastRowPayload(
                period=int(row.period),
                value=float(row.value),
                forecast=float(row.forecast),
                trend=float(row.trend),
                seasonal=float(row.seasonal),
            )
            for row in self.forecast.itertuples(index=False)
        ]
        return DecompositionPayload(
            decompcast_version=decompcast.__version__,
            model=self.config.model,
            season_length=self.config.season_length,
            n_observations=self.n_observations,
            slope=self.slope,
            intercept=self.intercept,
            seasonal_index=[float(v) for v in self.seasonal_index],
            metrics=fit_metrics(self.model),
            forecast=rows,
            duration_ms=self.duration_ms,
        )
