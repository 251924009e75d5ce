"""Tagged unions, records, interfaces and pattern matching as plain Python values."""

__version__ = "0.1.0"