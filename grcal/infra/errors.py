#grcal\infra\errors.py
"""
infra/errors.py

Two error regimes:
- ContractViolation: a caller broke a documented precondition (programmer error)
- InvalidDate: a user-supplied date or offset failed validation
"""


class GrcalError(Exception):
    """Base class for all grcal errors."""


class ContractViolation(GrcalError):
    """An argument was outside the range a function requires. Not recoverable."""


class InvalidDate(GrcalError, ValueError):
    """A year-month-day combination (or offset) is not a supported Gregorian day."""


class QueryError(GrcalError):
    """A command-line query was rejected; carries the diagnostic and exit status."""

    def __init__(self, message, exit_status=1, show_usage=False):
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status
        self.show_usage = show_usage
