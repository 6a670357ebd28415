from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class InvalidInputError(AppError, ValueError):
    """Raised when a numeric argument is missing, non-numeric, NaN or negative."""


class InvalidModeError(AppError):
    """Raised when a transport mode has no configured emission factor."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(f"Invalid transport mode: {mode}")


class InvalidResponseError(AppError):
    """Exception raised when a routing provider response is invalid or malformed."""


class ConfigError(AppError):
    """Raised when configuration or catalog data cannot be loaded."""
