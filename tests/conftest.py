"""Shared fixtures for decompcast tests."""

from __future__ import annotations

import pandas as pd
import pytest

from decompcast.series import from_values

# Two 4-period cycles: +10 per cycle, +20 within each cycle.
QUARTERLY_VALUES = [100.0, 120.0, 140.0, 160.0, 110.0, 130.0, 150.0, 170.0]


@pytest.fixture
def quarterly_series() -> pd.DataFrame:
    """Two full cycles of quarterly data."""
    return from_values(QUARTERLY_VALUES)


@pytest.fixture
def linear_series() -> pd.DataFrame:
    """Pure linear trend, no seasonality."""
    return from_values([10.0 + 2.0 * p for p in range(1, 13)])


@pytest.fixture
def multiplicative_series() -> pd.DataFrame:
    """Three cycles of a growing trend scaled by seasonal ratios."""
    ratios = [0.8, 1.1, 1.3, 0.8]
    return from_values([(50.0 + 5.0 * p) * ratios[(p - 1) % 4] for p in range(1, 13)])
