"""Core error types with rich context.

Insufficient data is not an error anywhere in decompcast: stages degrade to
an empty or unchanged table instead. Errors are reserved for input that
violates the series contract and for fits that cannot be computed.
"""

from __future__ import annotations

from typing import Any


class DecompCastError(Exception):
    """Base exception with rich context.

    Subclasses only differ by ``error_code`` and default ``fix_hint``.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EContract(DecompCastError):
    """Input series violates the observation contract."""

    error_code = "E_CONTRACT"
    fix_hint = "Series must have [period, value] columns, periods 1..N and finite values"


class EDegenerateFit(DecompCastError):
    """Trend regression has a zero denominator."""

    error_code = "E_DEGENERATE_FIT"
    fix_hint = "Add observations so at least two periods carry a centered moving average"


ERROR_REGISTRY: dict[str, type[DecompCastError]] = {
    "E_CONTRACT": EContract,
    "E_DEGENERATE_FIT": EDegenerateFit,
}


def get_error_class(error_code: str) -> type[DecompCastError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, DecompCastError)
