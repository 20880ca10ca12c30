"""
grcal: conversions between Gregorian dates and day offsets.

Day offset 0 is 1582-10-15, the first day of the Gregorian calendar;
DAY_MAX is 9999-12-31.
"""

from .core import CalendarDate, GregorianDayEngine, Weekday
from .infra import DAY_MAX, DAY_UNIX, ContractViolation, GrcalError, InvalidDate

offset_to_date = GregorianDayEngine.offset_to_date
date_to_offset = GregorianDayEngine.date_to_offset
is_valid_date = GregorianDayEngine.is_valid_date
weekday = GregorianDayEngine.weekday

__all__ = [
    "offset_to_date",
    "date_to_offset",
    "is_valid_date",
    "weekday",
    "GregorianDayEngine",
    "CalendarDate",
    "Weekday",
    "DAY_MAX",
    "DAY_UNIX",
    "GrcalError",
    "ContractViolation",
    "InvalidDate",
]
