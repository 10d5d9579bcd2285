"""Histogram sample accumulation for metrics awaiting render."""

import logging
import numbers
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..errors import ConfigurationError, HistogramRecordError
from .models import Key

logger = logging.getLogger(__name__)

MAX_TRACKABLE_VALUE = 2**63 - 1


class HistogramAccumulator:
    """Accumulates unsigned integer samples and answers count/quantile queries.
    
    Samples are kept exactly; quantiles follow the inverted-CDF rule, so every
    answer is one of the recorded samples (0.0 gives the minimum, 1.0 the
    maximum).
    """
    
    def __init__(self, highest_trackable_value: int = MAX_TRACKABLE_VALUE):
        """Initialize an empty accumulator.
        
        Args:
            highest_trackable_value: Largest sample that may be recorded
            
        Raises:
            ConfigurationError: If the highest trackable value is not an integer
                in [1, 2**63 - 1]
        """
        if (
            isinstance(highest_trackable_value, bool)
            or not isinstance(highest_trackable_value, numbers.Integral)
            or not 1 <= highest_trackable_value <= MAX_TRACKABLE_VALUE
        ):
            raise ConfigurationError(
                f"Invalid highest trackable value: {highest_trackable_value!r}"
            )
        
        self.highest_trackable_value = int(highest_trackable_value)
        self._chunks: List[np.ndarray] = []
        self._sorted: Optional[np.ndarray] = None
    
    def record(self, value: int) -> None:
        """Record a single sample."""
        self.record_values([value])
    
    def record_values(self, values: Iterable[int]) -> None:
        """Record a batch of samples.
        
        Raises:
            HistogramRecordError: If any sample is not an integer in
                [0, highest_trackable_value]; nothing from the batch is recorded
        """
        samples = np.asarray(list(values))
        if samples.size == 0:
            return
        
        if samples.dtype.kind not in "iu":
            raise HistogramRecordError(
                f"Histogram samples must be unsigned integers, got dtype {samples.dtype}"
            )
        if samples.min() < 0 or samples.max() > self.highest_trackable_value:
            raise HistogramRecordError(
                f"Histogram sample out of range [0, {self.highest_trackable_value}]: "
                f"min={samples.min()}, max={samples.max()}"
            )
        
        self._chunks.append(samples.astype(np.int64).ravel())
        self._sorted = None
    
    def merge(self, other: "HistogramAccumulator") -> None:
        """Add every sample recorded in ``other`` to this accumulator.
        
        Raises:
            HistogramRecordError: If a sample of ``other`` exceeds this
                accumulator's highest trackable value
        """
        if len(other) == 0:
            return
        self.record_values(other._samples())
    
    def __len__(self) -> int:
        return sum(chunk.size for chunk in self._chunks)
    
    def value_at_quantile(self, quantile: float) -> int:
        """Return the sample at the given quantile, or 0 when empty."""
        samples = self._samples()
        if samples.size == 0:
            return 0
        
        quantile = min(max(quantile, 0.0), 1.0)
        return int(np.quantile(samples, quantile, method="inverted_cdf"))
    
    def _samples(self) -> np.ndarray:
        if self._sorted is None:
            if self._chunks:
                self._sorted = np.sort(np.concatenate(self._chunks))
                self._chunks = [self._sorted]
            else:
                self._sorted = np.empty(0, dtype=np.int64)
        return self._sorted


class HistogramMap:
    """Per-key histogram accumulators, drained once per render."""
    
    def __init__(self, highest_trackable_value: int = MAX_TRACKABLE_VALUE):
        # Fail at construction rather than on the first observation
        HistogramAccumulator(highest_trackable_value)
        self.highest_trackable_value = highest_trackable_value
        self._histograms: Dict[Key, HistogramAccumulator] = {}
    
    def observe(self, key: Key, values: Iterable[int]) -> None:
        """Record ``values`` into the accumulator for ``key``, creating it if needed.
        
        Raises:
            HistogramRecordError: If the accumulator rejects a sample. This is an
                internal error: the caller is expected to pass well-formed samples.
        """
        histogram = self._histograms.get(key)
        created = histogram is None
        if created:
            histogram = HistogramAccumulator(self.highest_trackable_value)
        
        try:
            histogram.record_values(values)
        except HistogramRecordError as e:
            logger.error(f"Failed to observe histogram value for {key.name}: {e}")
            raise
        
        if created:
            self._histograms[key] = histogram
            logger.debug(f"Created histogram for {key.name}")
    
    def flush_all(self) -> Iterator[Tuple[Key, HistogramAccumulator]]:
        """Take every pending histogram, leaving the map empty.
        
        The map is emptied when this is called, not when the returned iterator
        is consumed, so each entry is handed out at most once.
        """
        entries = self._histograms
        self._histograms = {}
        logger.debug(f"Flushing {len(entries)} histograms")
        return iter(list(entries.items()))
    
    def __len__(self) -> int:
        return len(self._histograms)
    
    def __contains__(self, key: Key) -> bool:
        return key in self._histograms
