"""Quantile parsing and human-readable quantile labels."""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, List

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_QUANTILES = [0.0, 0.5, 0.9, 0.95, 0.99, 0.999, 1.0]

# Enough to absorb float noise from value * 100 (0.29 * 100 == 28.999999999999996)
_LABEL_PRECISION = 10


def quantile_label(value: float) -> str:
    """Map a quantile to its display label.
    
    0.0 is "min", 1.0 is "max", anything in between is the percentile with
    its decimal separator removed: 0.5 -> "p50", 0.999 -> "p999".
    """
    if value == 0.0:
        return "min"
    if value == 1.0:
        return "max"
    
    percentage = round(value * 100, _LABEL_PRECISION)
    formatted = f"{percentage:.{_LABEL_PRECISION}f}".rstrip("0").rstrip(".")
    return "p" + formatted.replace(".", "")


@dataclass(frozen=True)
class Quantile:
    """A quantile value paired with its display label."""
    
    value: float
    label: str
    
    @classmethod
    def from_value(cls, value: float) -> "Quantile":
        return cls(value=value, label=quantile_label(value))


def parse_quantiles(values: Iterable[float]) -> List[Quantile]:
    """Turn raw quantile values into ``Quantile`` objects.
    
    Values outside [0.0, 1.0] are clamped into range. The caller's order is
    kept, since it is the order histogram lines are rendered in.
    
    Args:
        values: Raw quantile values, e.g. [0.0, 0.5, 0.99, 1.0]
        
    Returns:
        List of Quantile instances
        
    Raises:
        ConfigurationError: If a value is not a real number
    """
    quantiles = []
    for raw in values:
        if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
            raise ConfigurationError(f"Quantile must be a number, got {raw!r}")
        if math.isnan(raw):
            raise ConfigurationError("Quantile must not be NaN")
        
        value = min(max(float(raw), 0.0), 1.0)
        if value != raw:
            logger.warning(f"Quantile {raw} clamped to {value}")
        quantiles.append(Quantile.from_value(value))
    
    return quantiles
