"""Errors raised while declaring a benchmark suite.

None of these are retried. Each one aborts suite construction and propagates
to whoever is declaring the suite.
"""

from enum import Enum
from typing import Any, Dict


class ErrorCategory(Enum):
    """Error category classification"""
    FATAL_SETUP = "fatal_setup"
    CONFIGURATION = "configuration"


class FixtureError(Exception):
    """Base exception for fixture building errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    category: ErrorCategory = ErrorCategory.FATAL_SETUP

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class PoolBoundsError(FixtureError):
    """Raised when a filler string larger than the pool capacity is requested.

    Example:
        >>> raise PoolBoundsError("Requested size was too large", size=20, capacity=10)
    """


class IndexSetupError(FixtureError):
    """Raised when an index cannot be created while populating a collection."""


class ConfigurationError(FixtureError):
    """Raised for missing required options or unsupported option combinations."""

    category = ErrorCategory.CONFIGURATION


class DuplicateTestCaseError(ConfigurationError):
    """Raised when two test cases in one registry share a name."""
