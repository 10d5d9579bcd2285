"""Metric identities, quantiles and histogram accumulation."""

from .histogram import HistogramAccumulator, HistogramMap
from .models import Key, Label
from .quantiles import DEFAULT_QUANTILES, Quantile, parse_quantiles, quantile_label

__all__ = [
    "DEFAULT_QUANTILES",
    "HistogramAccumulator",
    "HistogramMap",
    "Key",
    "Label",
    "Quantile",
    "parse_quantiles",
    "quantile_label",
]
