"""
rules/rules.py

Gregorian calendar rules used by the day engine.

Encapsulates:
- Leap-year predicate (January-based years)
- March-based month pattern (long / short / variable)
- Month-length lookup and February resolution
"""

from enum import Enum

from grcal.infra.constants import CONSTANTS
from grcal.infra.errors import ContractViolation
from grcal.infra.logger import LoggerFactory

log = LoggerFactory.get_logger("grcal.rules")


class MonthKind(Enum):
    """Length class of a month slot."""

    LONG = "long"
    SHORT = "short"
    VARIABLE = "variable"


# March-based order: index 0 is March, index 11 is February
MONTH_PATTERN = (
    MonthKind.LONG,      # Mar
    MonthKind.SHORT,     # Apr
    MonthKind.LONG,      # May
    MonthKind.SHORT,     # Jun
    MonthKind.LONG,      # Jul
    MonthKind.LONG,      # Aug
    MonthKind.SHORT,     # Sep
    MonthKind.LONG,      # Oct
    MonthKind.SHORT,     # Nov
    MonthKind.LONG,      # Dec
    MonthKind.LONG,      # Jan
    MonthKind.VARIABLE,  # Feb
)

_FIXED_LENGTHS = {
    MonthKind.LONG: CONSTANTS.long_month_length,
    MonthKind.SHORT: CONSTANTS.short_month_length,
}


class CalendarRules:
    """Stateless Gregorian rules."""

    @staticmethod
    def is_leap_year(year):
        """Return True if the January-based ``year`` is a Gregorian leap year."""
        if year < 1:
            log.debug("is_leap_year called with year=%r", year)
            raise ContractViolation(f"year must be >= 1, got {year!r}")
        if year % 400 == 0:
            return True
        return year % 4 == 0 and year % 100 != 0

    @staticmethod
    def month_kind(index):
        """Return the MonthKind of March-based month ``index`` (0..11)."""
        if not 0 <= index < CONSTANTS.month_count:
            log.debug("month index out of range: %r", index)
            raise ContractViolation(f"March-based month index must be 0..11, got {index!r}")
        return MONTH_PATTERN[index]

    @classmethod
    def month_length(cls, index):
        """
        Fixed length in days of March-based month ``index``,
        or None for the variable-length slot (February).
        """
        return _FIXED_LENGTHS.get(cls.month_kind(index))

    @classmethod
    def resolve_month_length(cls, index, march_year):
        """
        Actual length of March-based month ``index`` in March-based ``march_year``.
        The trailing February belongs to January-based year march_year + 1.
        """
        length = cls.month_length(index)
        if length is not None:
            return length
        if cls.is_leap_year(march_year + 1):
            return CONSTANTS.leap_month_length
        return CONSTANTS.nonleap_month_length
