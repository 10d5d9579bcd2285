"""Exceptions raised by metricstext."""


class MetricsTextError(Exception):
    """Base class for all metricstext errors."""
    pass


class ConfigurationError(MetricsTextError):
    """Raised when observer, histogram or snapshot configuration is invalid."""
    pass


class InvalidKeyError(MetricsTextError, ValueError):
    """Raised when a metric key has no leaf name component."""
    pass


class HistogramRecordError(MetricsTextError, ValueError):
    """Raised when a histogram accumulator rejects a sample."""
    pass
