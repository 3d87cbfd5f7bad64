"""Error taxonomy for termprogress."""

from enum import Enum, auto
from typing import Optional


class ErrorCategory(Enum):
    """Broad classes of failure."""

    OUTPUT = auto()
    CONFIG = auto()
    INTERNAL = auto()


class TermProgressError(Exception):
    """Base class for all termprogress errors."""

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, *, category: Optional[ErrorCategory] = None):
        super().__init__(message)
        if category:
            self.category = category


class OutputError(TermProgressError):
    """Writing to the output stream failed.

    Raised once and never retried: a broken terminal or pipe cannot be
    redrawn into a consistent state.
    """

    category = ErrorCategory.OUTPUT


class ConfigurationError(TermProgressError):
    """Configuration-related errors."""

    category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "TermProgressError",
    "OutputError",
    "ConfigurationError",
]
