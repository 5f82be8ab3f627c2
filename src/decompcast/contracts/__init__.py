"""JSON contracts for decompcast results."""

from .payloads import (
    PAYLOAD_SCHEMA_VERSION,
    PAYLOAD_TYPE,
    DecompositionPayload,
    ForecastRowPayload,
)

__all__ = [
    "PAYLOAD_TYPE",
    "PAYLOAD_SCHEMA_VERSION",
    "DecompositionPayload",
    "ForecastRowPayload",
]
