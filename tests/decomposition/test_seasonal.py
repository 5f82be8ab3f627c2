"""Tests for seasonal index extraction."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from decompcast.decomposition import extract_seasonal, normalize_indices, seasonal_index, smooth
from decompcast.decomposition.convention import combine, phases, remove
from decompcast.series import from_values


@pytest.fixture
def additive_table(quarterly_series):
    return extract_seasonal(smooth(quarterly_series), model="additive")


class TestAdditiveExtraction:
    """Test extract_seasonal with the additive model."""

    def test_raw_components(self, additive_table):
        """Raw component is value minus centered average."""
        defined = additive_table["seasonal_component"].dropna()
        assert defined.tolist() == pytest.approx([28.75, -23.75, -6.25, 11.25])

    def test_average_by_phase(self, additive_table):
        """Each phase has one cycle of components here."""
        index = additive_table.groupby(phases(additive_table["period"], 4))[
            "average_seasonal_component"
        ].first()
        assert index.tolist() == pytest.approx([-23.75, -6.25, 11.25, 28.75])

    def test_adjusted_indices_sum_to_zero(self, additive_table):
        """Additive indices are centered on zero."""
        index = seasonal_index(additive_table)
        assert index.tolist() == pytest.approx([-26.25, -8.75, 8.75, 26.25])
        assert index.sum() == pytest.approx(0.0, abs=1e-9)

    def test_deseasonalized(self, additive_table):
        """Removing the index leaves a straight line for this series."""
        expected = [126.25 + 2.5 * i for i in range(8)]
        assert additive_table["deseasonalized"].tolist() == pytest.approx(expected)

    def test_round_trip(self, additive_table):
        """value == deseasonalized + adjusted index."""
        rebuilt = additive_table["deseasonalized"] + additive_table["adjusted_seasonal_component"]
        np.testing.assert_allclose(rebuilt, additive_table["value"])

    def test_index_broadcast_to_every_row(self, additive_table):
        """Rows without a centered average still carry their phase index."""
        assert additive_table["adjusted_seasonal_component"].notna().all()
        assert additive_table["seasonal_component"].isna().sum() == 4

    def test_phase_periodicity(self, linear_series):
        """Periods p and p + 4 share an index."""
        table = extract_seasonal(smooth(linear_series), model="additive")
        adjusted = table.set_index("period")["adjusted_seasonal_component"]
        for p in range(1, 9):
            assert adjusted[p] == adjusted[p + 4]

    def test_linear_series_has_zero_indices(self, linear_series):
        """No seasonality means all-zero additive indices."""
        table = extract_seasonal(smooth(linear_series), model="additive")
        np.testing.assert_allclose(seasonal_index(table), 0.0, atol=1e-9)

    def test_input_not_mutated(self, quarterly_series):
        """Extraction builds a new frame."""
        smoothed = smooth(quarterly_series)
        columns = list(smoothed.columns)
        extract_seasonal(smoothed, model="additive")
        assert list(smoothed.columns) == columns


class TestMultiplicativeExtraction:
    """Test extract_seasonal with the multiplicative model."""

    def test_raw_component_is_ratio(self, quarterly_series):
        """Raw component is value over centered average."""
        table = extract_seasonal(smooth(quarterly_series), model="multiplicative")
        assert table["seasonal_component"].dropna().tolist() == pytest.approx(
            [160 / 131.25, 110 / 133.75, 130 / 136.25, 150 / 138.75]
        )

    def test_indices_multiply_to_one(self, multiplicative_series):
        """Geometric normalization gives a product of one."""
        table = extract_seasonal(smooth(multiplicative_series), model="multiplicative")
        assert np.prod(seasonal_index(table)) == pytest.approx(1.0)

    def test_arithmetic_normalization(self, multiplicative_series):
        """Arithmetic normalization gives a mean of one."""
        table = extract_seasonal(
            smooth(multiplicative_series), model="multiplicative", normalization="arithmetic"
        )
        assert seasonal_index(table).mean() == pytest.approx(1.0)

    def test_round_trip(self, multiplicative_series):
        """value == deseasonalized * adjusted index."""
        table = extract_seasonal(smooth(multiplicative_series), model="multiplicative")
        rebuilt = table["deseasonalized"] * table["adjusted_seasonal_component"]
        np.testing.assert_allclose(rebuilt, table["value"])

    def test_zero_centered_average_leaves_component_undefined(self):
        """Zero divisor leaves the raw ratio undefined; phases fall back to neutral."""
        table = extract_seasonal(smooth(from_values([0.0] * 8)), model="multiplicative")
        assert table["seasonal_component"].isna().all()
        np.testing.assert_allclose(seasonal_index(table), 1.0)
        assert table["deseasonalized"].tolist() == [0.0] * 8


class TestExtractionGuards:
    """Test no-op guards."""

    def test_too_few_centered_rows_returns_input(self):
        """Fewer than season_length centered rows is a no-op."""
        smoothed = smooth(from_values([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]))
        assert extract_seasonal(smoothed, model="additive") is smoothed

    def test_unsmoothed_input_returns_input(self, quarterly_series):
        """A raw series has no centered average at all."""
        assert extract_seasonal(quarterly_series) is quarterly_series

    def test_unknown_model_raises(self, quarterly_series):
        """Model flag must be additive or multiplicative."""
        with pytest.raises(ValueError, match="model"):
            extract_seasonal(smooth(quarterly_series), model="mixed")

    def test_seasonal_index_empty_without_extraction(self, quarterly_series):
        """No adjusted column means an empty index."""
        assert seasonal_index(smooth(quarterly_series)).size == 0


class TestNormalizeIndices:
    """Test normalize_indices function."""

    def test_additive(self):
        result = normalize_indices(np.array([1.0, 2.0, 3.0, 6.0]), "additive")
        assert result.tolist() == pytest.approx([-2.0, -1.0, 0.0, 3.0])

    def test_geometric(self):
        result = normalize_indices(np.array([0.5, 2.0, 1.0, 4.0]), "multiplicative")
        assert np.prod(result) == pytest.approx(1.0)
        assert result.tolist() == pytest.approx([0.5 / 2**0.5, 2.0 / 2**0.5, 1.0 / 2**0.5, 4.0 / 2**0.5])

    def test_non_positive_product_falls_back(self, caplog):
        """Negative product uses the arithmetic mean and warns."""
        with caplog.at_level(logging.WARNING, logger="decompcast.decomposition.seasonal"):
            result = normalize_indices(np.array([-1.0, 2.0, 2.0, 2.0]), "multiplicative")
        assert result.tolist() == pytest.approx([-0.8, 1.6, 1.6, 1.6])
        assert "arithmetic" in caplog.text

    def test_zero_factor_gives_neutral(self):
        result = normalize_indices(np.array([-2.0, 1.0, 1.0, 0.0]), "multiplicative")
        assert result.tolist() == [1.0, 1.0, 1.0, 1.0]

    def test_unknown_normalization(self):
        with pytest.raises(ValueError, match="normalization"):
            normalize_indices(np.array([1.0, 1.0]), "multiplicative", normalization="median")


class TestConvention:
    """Test the shared seasonal convention helpers."""

    def test_phases(self):
        assert phases(np.array([1, 2, 3, 4, 5, 8, 9]), 4).tolist() == [0, 1, 2, 3, 0, 3, 0]

    def test_combine(self):
        assert combine(10.0, 2.0, "additive") == 12.0
        assert combine(10.0, 2.0, "multiplicative") == 20.0

    def test_remove_zero_index_leaves_value(self):
        values = pd.Series([10.0, 20.0])
        seasonal = pd.Series([0.0, 2.0])
        assert remove(values, seasonal, "multiplicative").tolist() == [10.0, 10.0]
