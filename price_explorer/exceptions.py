"""
Domain errors for the price explorer.

Pure analysis modules raise these; services let them propagate and the
controllers translate them into HTTP responses.
"""


class PriceExplorerError(Exception):
    """Base class for all price explorer errors."""


class EmptyInputError(PriceExplorerError):
    """Raised when there are no samples to aggregate."""

    def __init__(self, message: str = "No data found"):
        super().__init__(message)


class InvalidTimestampError(PriceExplorerError, ValueError):
    """Raised when a timestamp string cannot be parsed."""


class InvalidProfileLengthError(PriceExplorerError, ValueError):
    """Raised when a load profile does not hold exactly 24 values."""


class InvalidProfileValueError(PriceExplorerError, ValueError):
    """Raised when a load profile value is not a usable number."""


class InvariantViolationError(PriceExplorerError):
    """Raised on internal consistency failures (e.g. hour outside 0..23)."""


class DatasetNotFoundError(PriceExplorerError):
    """Raised when a requested dataset file does not exist."""


class DatasetFormatError(PriceExplorerError):
    """Raised when a dataset file cannot be parsed as CSV."""
