"""Custom exceptions for the cliff search domain."""


class CliffSearchError(Exception):
    """Base exception for this project."""


class ConfigError(CliffSearchError):
    """Raised when searcher construction parameters are invalid."""


class InvalidLoadError(CliffSearchError):
    """Raised when a caller-supplied load value is not a non-negative integer."""
