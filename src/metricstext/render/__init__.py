"""Text rendering of metric snapshots."""

from .formatting import histogram_to_lines, key_to_parts, single_value_to_lines
from .tree import InlineEntry, MetricsTree, NestedEntry

__all__ = [
    "InlineEntry",
    "MetricsTree",
    "NestedEntry",
    "histogram_to_lines",
    "key_to_parts",
    "single_value_to_lines",
]
