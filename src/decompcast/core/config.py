"""Configuration for a decomposition run.

A single frozen config carries every scalar parameter of the pipeline.
Changing any of them means building a new config and re-running.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

Model = Literal["additive", "multiplicative"]
Normalization = Literal["geometric", "arithmetic"]

MODELS: tuple[str, ...] = ("additive", "multiplicative")
NORMALIZATIONS: tuple[str, ...] = ("geometric", "arithmetic")

DEFAULT_SEASON_LENGTH = 4


@dataclass(frozen=True)
class DecompositionConfig:
    """Parameters for classical decomposition and forecasting.

    Args:
        season_length: Observations per seasonal cycle
        model: 'additive' or 'multiplicative' seasonality
        horizon: Number of future periods to forecast (0 to skip)
        normalization: How multiplicative indices are normalized,
            'geometric' (product is one) or 'arithmetic' (mean is one)
        include_boundary: Prefix the forecast with a row at the last
            observed period so plotted lines connect
    """

    season_length: int = DEFAULT_SEASON_LENGTH
    model: Model = "additive"
    horizon: int = 0
    normalization: Normalization = "geometric"
    include_boundary: bool = False

    def __post_init__(self) -> None:
        if self.season_length < 2:
            raise ValueError(f"season_length must be at least 2, got {self.season_length}")
        if self.model not in MODELS:
            raise ValueError(f"model must be one of {MODELS}, got {self.model!r}")
        if self.horizon < 0:
            raise ValueError(f"horizon must be non-negative, got {self.horizon}")
        if self.normalization not in NORMALIZATIONS:
            raise ValueError(
                f"normalization must be one of {NORMALIZATIONS}, got {self.normalization!r}"
            )

    @classmethod
    def additive(cls, horizon: int = 0, season_length: int = DEFAULT_SEASON_LENGTH) -> DecompositionConfig:
        """Additive preset: value = trend + seasonal."""
        return cls(season_length=season_length, model="additive", horizon=horizon)

    @classmethod
    def multiplicative(
        cls, horizon: int = 0, season_length: int = DEFAULT_SEASON_LENGTH
    ) -> DecompositionConfig:
        """Multiplicative preset: value = trend * seasonal ratio."""
        return cls(season_length=season_length, model="multiplicative", horizon=horizon)

    def with_horizon(self, horizon: int) -> DecompositionConfig:
        return replace(self, horizon=horizon)

    def with_model(self, model: Model) -> DecompositionConfig:
        return replace(self, model=model)
