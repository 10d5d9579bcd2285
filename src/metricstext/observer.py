"""Observer that renders metric snapshots as an indented text tree.

For a snapshot with the counters ``server.msgs_received`` and
``server.msgs_sent`` the output is::

    server:
      msgs_received: 42
      msgs_sent: 13

Entries are sorted alphabetically at every level. Histograms are rendered as a
sample count followed by one line per configured quantile::

    connect_time count: 15
    connect_time min: 1334
    connect_time p50: 1934
    connect_time max: 139389
"""

import logging
import numbers
from typing import Iterable, List, Optional

from .metrics.histogram import MAX_TRACKABLE_VALUE, HistogramMap
from .metrics.models import Key
from .metrics.quantiles import DEFAULT_QUANTILES, Quantile, parse_quantiles
from .render.formatting import histogram_to_lines, key_to_parts, single_value_to_lines
from .render.tree import MetricsTree

logger = logging.getLogger(__name__)


class TextBuilder:
    """Builds ``TextObserver`` instances with a fixed set of quantiles."""
    
    def __init__(
        self,
        quantiles: Optional[Iterable[float]] = None,
        highest_trackable_value: int = MAX_TRACKABLE_VALUE,
    ):
        """Initialize the builder.
        
        Args:
            quantiles: Quantiles used when rendering histograms. Defaults to
                0.0, 0.5, 0.9, 0.95, 0.99, 0.999 and 1.0.
            highest_trackable_value: Largest histogram sample accepted
        """
        if quantiles is None:
            quantiles = DEFAULT_QUANTILES
        self.quantiles: List[Quantile] = parse_quantiles(quantiles)
        self.highest_trackable_value = highest_trackable_value
    
    @classmethod
    def with_quantiles(cls, quantiles: Iterable[float]) -> "TextBuilder":
        return cls(quantiles=quantiles)
    
    def build(self) -> "TextObserver":
        return TextObserver(
            quantiles=self.quantiles,
            highest_trackable_value=self.highest_trackable_value,
        )


class TextObserver:
    """Collects observations and renders them as hierarchical text.
    
    Counters and gauges go into the tree as soon as they are observed.
    Histograms are accumulated per key and only turned into lines by
    ``render``, which also empties the observer for the next cycle.
    
    Not thread-safe: one observer serves one collection cycle at a time.
    """
    
    def __init__(
        self,
        quantiles: Iterable[Quantile],
        highest_trackable_value: int = MAX_TRACKABLE_VALUE,
    ):
        self.quantiles: List[Quantile] = list(quantiles)
        self.structure = MetricsTree(level=0)
        self.histograms = HistogramMap(highest_trackable_value)
        
        logger.info(
            f"TextObserver initialized with quantiles "
            f"{[q.label for q in self.quantiles]}"
        )
    
    def observe_counter(self, key: Key, value: int) -> None:
        """Record a counter value. Counters must be non-negative integers."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
            raise ValueError(f"Counter {key.name} value must be a non-negative integer, got {value!r}")
        self._observe_single(key, value)
    
    def observe_gauge(self, key: Key, value: int) -> None:
        """Record a gauge value, which may be negative."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Gauge {key.name} value must be an integer, got {value!r}")
        self._observe_single(key, value)
    
    def observe_histogram(self, key: Key, values: Iterable[int]) -> None:
        """Accumulate histogram samples; nothing is rendered until ``render``."""
        # Reject malformed keys now rather than at flush time
        key_to_parts(key)
        self.histograms.observe(key, values)
    
    def _observe_single(self, key: Key, value: int) -> None:
        path, name = key_to_parts(key)
        # Sort key is the line prefix up to the value, so scalars order by their text
        self.structure.insert(path, single_value_to_lines(name, value), sort_name=f"{name}:")
        logger.debug(f"Observed {key.name} = {value}")
    
    def render(self) -> str:
        """Flush pending histograms into the tree and render it.
        
        This empties the observer: calling it again without new observations
        returns an empty string.
        """
        flushed = 0
        for key, histogram in self.histograms.flush_all():
            path, name = key_to_parts(key)
            # One key for the whole group keeps count and quantiles in configured order
            self.structure.insert(
                path, histogram_to_lines(name, histogram, self.quantiles), sort_name=f"{name} "
            )
            flushed += 1
        
        output = self.structure.render()
        logger.debug(f"Rendered snapshot with {flushed} histograms ({len(output)} chars)")
        return output
    
    drain = render
