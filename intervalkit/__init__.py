"""intervalkit: construct and identify musical intervals."""

__version__ = "0.1.0"

from intervalkit.intervals import interval_construction, interval_identification

__all__ = ["__version__", "interval_construction", "interval_identification"]
