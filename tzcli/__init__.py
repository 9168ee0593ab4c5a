"""Command-line world clock for a configurable list of time zones."""

__version__ = "0.1.0"
__all__ = ["__version__"]