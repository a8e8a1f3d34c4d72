"""Stemlight error types."""


class StemlightError(Exception):
    """Base error for all stemlight failures."""


class TransformError(StemlightError, TypeError):
    """Transform configuration is neither a literal nor a callable."""
