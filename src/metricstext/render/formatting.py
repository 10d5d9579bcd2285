"""Helpers that turn keys and values into formatted metric lines."""

from typing import Any, List, Sequence, Tuple

from ..errors import InvalidKeyError
from ..metrics.histogram import HistogramAccumulator
from ..metrics.models import Key
from ..metrics.quantiles import Quantile

NAME_SEPARATOR = "."


def key_to_parts(key: Key) -> Tuple[List[str], str]:
    """Split a key into its tree path and its display name.
    
    The last dot-separated segment of the name is the leaf; labels, if any,
    are appended to it as ``{k="v",...}`` in the order they were given.
    
    Returns:
        (path segments without the leaf, leaf display name)
        
    Raises:
        InvalidKeyError: If the name has no leaf component
    """
    parts = key.name.split(NAME_SEPARATOR)
    name = parts.pop()
    if not name:
        raise InvalidKeyError(f"Metric name {key.name!r} has no leaf component")
    
    if key.has_labels():
        labels = ",".join(str(label) for label in key.labels)
        name = f"{name}{{{labels}}}"
    
    return parts, name


def single_value_to_lines(name: str, value: Any) -> List[str]:
    return [f"{name}: {value}"]


def histogram_to_lines(
    name: str, histogram: HistogramAccumulator, quantiles: Sequence[Quantile]
) -> List[str]:
    """Format a histogram as a count line followed by one line per quantile."""
    lines = [f"{name} count: {len(histogram)}"]
    for quantile in quantiles:
        value = histogram.value_at_quantile(quantile.value)
        lines.append(f"{name} {quantile.label}: {value}")
    return lines
