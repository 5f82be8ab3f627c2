"""Tests for moving-average smoothing."""

from __future__ import annotations

import numpy as np
import pytest

from decompcast.decomposition import smooth
from decompcast.series import from_values


class TestSmooth:
    """Test smooth function."""

    def test_moving_average_starts_at_season_length(self, quarterly_series):
        """Trailing average is defined from period 4 onwards."""
        result = smooth(quarterly_series)
        ma = result["moving_average"]
        assert ma.iloc[:3].isna().all()
        assert ma.iloc[3:].tolist() == pytest.approx([130.0, 132.5, 135.0, 137.5, 140.0])

    def test_centered_range(self, quarterly_series):
        """Centered average is defined for periods 4-7 only."""
        result = smooth(quarterly_series)
        defined = result.loc[result["centered_moving_average"].notna(), "period"]
        assert defined.tolist() == [4, 5, 6, 7]
        assert result["centered_moving_average"].dropna().tolist() == pytest.approx(
            [131.25, 133.75, 136.25, 138.75]
        )

    def test_deviation(self, quarterly_series):
        """Deviation is value minus centered average where defined."""
        result = smooth(quarterly_series)
        expected = result["value"] - result["centered_moving_average"]
        np.testing.assert_allclose(
            result["deviation_from_moving_average"], expected, equal_nan=True
        )
        assert result["deviation_from_moving_average"].isna().sum() == 4

    def test_short_series_has_no_moving_average(self):
        """Fewer than season_length observations leaves everything undefined."""
        result = smooth(from_values([1.0, 2.0, 3.0]))
        assert len(result) == 3
        assert result["moving_average"].isna().all()
        assert result["centered_moving_average"].isna().all()

    def test_empty_series(self):
        """Empty series is a no-op."""
        result = smooth(from_values([]))
        assert len(result) == 0
        assert "moving_average" in result.columns

    def test_exactly_one_cycle(self):
        """One cycle gives a single moving average and no centered value."""
        result = smooth(from_values([1.0, 2.0, 3.0, 4.0]))
        assert result["moving_average"].notna().sum() == 1
        assert result["centered_moving_average"].isna().all()

    def test_input_not_mutated(self, quarterly_series):
        """Smoothing returns a new frame."""
        before = quarterly_series.copy()
        smooth(quarterly_series)
        assert list(quarterly_series.columns) == ["period", "value"]
        assert quarterly_series.equals(before)

    def test_custom_season_length(self):
        """Window follows season_length."""
        result = smooth(from_values([3.0, 6.0, 9.0, 12.0, 15.0]), season_length=3)
        assert result["moving_average"].dropna().tolist() == pytest.approx([6.0, 9.0, 12.0])
        assert result["centered_moving_average"].dropna().tolist() == pytest.approx([7.5, 10.5])
