"""Pydantic payload models for serialized decomposition runs.

These models define the JSON boundary while the pipeline itself keeps
working with dataclasses and DataFrames.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _PayloadModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


PAYLOAD_TYPE = "decompcast.decomposition"
PAYLOAD_SCHEMA_VERSION = 1


def _none_if_nan(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class ForecastRowPayload(_PayloadModel):
    """One forecast period. ``value`` is only set on a boundary row."""

    period: int = Field(ge=1)
    value: float | None = None
    forecast: float
    trend: float
    seasonal: float

    @field_validator("value", mode="before")
    @classmethod
    def _nan_value(cls, value: Any) -> Any:
        return _none_if_nan(value)


class DecompositionPayload(_PayloadModel):
    """Serializable summary of one pipeline run."""

    payload_type: Literal["decompcast.decomposition"] = PAYLOAD_TYPE
    schema_version: int = Field(PAYLOAD_SCHEMA_VERSION, ge=1)
    decompcast_version: str | None = None
    model: Literal["additive", "multiplicative"]
    season_length: int = Field(ge=2)
    n_observations: int = Field(ge=0)
    slope: float
    intercept: float
    seasonal_index: list[float] = Field(default_factory=list)
    metrics: dict[str, float] = Field(default_factory=dict)
    forecast: list[ForecastRowPayload] = Field(default_factory=list)
    duration_ms: float | None = None


__all__ = [
    "PAYLOAD_TYPE",
    "PAYLOAD_SCHEMA_VERSION",
    "ForecastRowPayload",
    "DecompositionPayload",
]
