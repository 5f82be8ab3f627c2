"""Seasonal index extraction.

Raw seasonal components are measured against the centered moving average,
averaged per phase across cycles, then normalized so the L indices are
consistent: additive indices sum to zero, multiplicative indices multiply
to one (geometric normalization) or average to one (arithmetic).
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from decompcast.core.config import DEFAULT_SEASON_LENGTH
from decompcast.core.types import (
    ADJUSTED_SEASONAL_COMPONENT as ADJUSTED,
    CENTERED_MOVING_AVERAGE as CMA,
    PERIOD,
    VALUE,
)
from decompcast.decomposition.convention import check_model, neutral_index, phases, remove

logger = logging.getLogger(__name__)


def raw_seasonal_component(table: pd.DataFrame, model: str) -> pd.Series:
    """Detrended signal per period, undefined where the CMA is undefined or zero."""
    cma = table[CMA]
    if check_model(model) == "additive":
        return table[VALUE] - cma
    return table[VALUE] / cma.where(cma != 0)


def average_by_phase(
    components: pd.Series,
    period: pd.Series,
    season_length: int,
    model: str,
) -> np.ndarray:
    """Average defined components per phase; empty phases get the neutral index."""
    grouped = components.groupby(phases(period, season_length)).mean()
    averages = grouped.reindex(range(season_length))
    return averages.fillna(neutral_index(model)).to_numpy(dtype=float)


def normalize_indices(
    averages: np.ndarray,
    model: str,
    normalization: str = "geometric",
) -> np.ndarray:
    """Make the per-phase averages internally consistent."""
    averages = np.asarray(averages, dtype=float)
    if check_model(model) == "additive":
        return averages - averages.mean()

    if normalization == "geometric":
        product = float(np.prod(averages))
        if product > 0:
            factor = product ** (1.0 / averages.size)
        else:
            logger.warning(
                "Geometric normalization undefined (product %.6g), using arithmetic mean",
                product,
            )
            factor = float(averages.mean())
    elif normalization == "arithmetic":
        factor = float(averages.mean())
    else:
        raise ValueError(f"Unknown normalization: {normalization!r}")

    if factor == 0:
        logger.warning("Seasonal normalization factor is zero, using neutral indices")
        return np.ones_like(averages)
    return averages / factor


def extract_seasonal(
    table: pd.DataFrame,
    model: str = "additive",
    season_length: int = DEFAULT_SEASON_LENGTH,
    normalization: str = "geometric",
) -> pd.DataFrame:
    """Add seasonal component, index and deseasonalized columns.

    Args:
        table: Smoother output
        model: 'additive' or 'multiplicative'
        season_length: Observations per cycle
        normalization: Multiplicative normalization, 'geometric' or 'arithmetic'

    Returns:
        New DataFrame with seasonal_component, average_seasonal_component,
        adjusted_seasonal_component and deseasonalized. The input is
        returned unchanged when fewer than ``season_length`` rows carry a
        centered moving average.
    """
    check_model(model)
    n_centered = int(table[CMA].notna().sum()) if CMA in table.columns else 0
    if n_centered < season_length:
        logger.debug(
            "Seasonal extraction skipped: %d centered rows, need %d",
            n_centered,
            season_length,
        )
        return table

    components = raw_seasonal_component(table, model)
    averages = average_by_phase(components, table[PERIOD], season_length, model)
    adjusted = normalize_indices(averages, model, normalization)

    phase = phases(table[PERIOD], season_length)
    adjusted_col = pd.Series(adjusted[phase], index=table.index)
    logger.debug("Seasonal indices (%s): %s", model, np.round(adjusted, 6).tolist())

    return table.assign(
        seasonal_component=components,
        average_seasonal_component=averages[phase],
        adjusted_seasonal_component=adjusted_col,
        deseasonalized=remove(table[VALUE], adjusted_col, model),
    )


def seasonal_index(table: pd.DataFrame, season_length: int = DEFAULT_SEASON_LENGTH) -> np.ndarray:
    """Phase-indexed array of adjusted seasonal indices.

    Returns an empty array when the table carries no indices.
    """
    if ADJUSTED not in table.columns or table[ADJUSTED].isna().all():
        return np.array([], dtype=float)
    by_phase = table[ADJUSTED].groupby(phases(table[PERIOD], season_length)).first()
    return by_phase.reindex(range(season_length)).to_numpy(dtype=float)
