"""Core module - configuration, errors, results and shared column names."""

from decompcast.core.config import DecompositionConfig
from decompcast.core.errors import (
    DecompCastError,
    EContract,
    EDegenerateFit,
)
from decompcast.core.results import DecompositionResult

__all__ = [
    # Config
    "DecompositionConfig",
    # Results
    "DecompositionResult",
    # Errors
    "DecompCastError",
    "EContract",
    "EDegenerateFit",
]
