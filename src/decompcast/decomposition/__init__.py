"""Classical decomposition stages.

Smoother -> Seasonal Extractor -> Trend Model -> Forecaster. Each stage is a
pure function of its input table and scalar parameters.
"""

from decompcast.decomposition.forecaster import forecast
from decompcast.decomposition.seasonal import extract_seasonal, normalize_indices, seasonal_index
from decompcast.decomposition.smoother import smooth
from decompcast.decomposition.trend import fit_and_model, fit_trend

__all__ = [
    "smooth",
    "extract_seasonal",
    "normalize_indices",
    "seasonal_index",
    "fit_trend",
    "fit_and_model",
    "forecast",
]
