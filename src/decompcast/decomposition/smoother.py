"""Moving-average smoothing.

``moving_average`` at period p is the trailing mean of the last L values.
``centered_moving_average`` at period p averages the moving averages at p and
p + 1, so it is defined for periods L..N-1 and undefined at both ends.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from decompcast.core.config import DEFAULT_SEASON_LENGTH
from decompcast.core.types import SMOOTHER_COLUMNS, VALUE

logger = logging.getLogger(__name__)


def smooth(series: pd.DataFrame, season_length: int = DEFAULT_SEASON_LENGTH) -> pd.DataFrame:
    """Add moving-average columns to an observation series.

    Args:
        series: DataFrame with [period, value], periods 1..N
        season_length: Window of the trailing moving average

    Returns:
        New DataFrame with moving_average, centered_moving_average and
        deviation_from_moving_average. With fewer than ``season_length``
        observations all three columns are undefined.
    """
    if len(series) < season_length:
        logger.debug(
            "Smoother skipped: %d observations, need %d", len(series), season_length
        )
        return series.assign(**{column: np.nan for column in SMOOTHER_COLUMNS})

    moving_average = series[VALUE].rolling(window=season_length).mean()
    centered = (moving_average + moving_average.shift(-1)) / 2

    logger.debug(
        "Smoother: %d moving averages, %d centered",
        int(moving_average.notna().sum()),
        int(centered.notna().sum()),
    )
    return series.assign(
        moving_average=moving_average,
        centered_moving_average=centered,
        deviation_from_moving_average=series[VALUE] - centered,
    )
