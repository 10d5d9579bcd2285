"""metricstext: hierarchical, text-based rendering of metric snapshots."""

from .metrics import Key, Label, Quantile, parse_quantiles, quantile_label
from .observer import TextBuilder, TextObserver

__version__ = "0.1.0"

__all__ = [
    "Key",
    "Label",
    "Quantile",
    "TextBuilder",
    "TextObserver",
    "parse_quantiles",
    "quantile_label",
]
