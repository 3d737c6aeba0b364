"""
Custom exceptions for the OneMax genetic algorithm.

Configuration problems are the only recoverable error class; everything the
engine does after a configuration has been validated is total over its inputs.
"""

from typing import Optional, Any

class OneMaxException(Exception):
    """Base exception for errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(OneMaxException):
    """Raised when simulation parameters or configuration sources are invalid."""
    pass
