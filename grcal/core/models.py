"""Value types returned by the day engine."""

from enum import IntEnum
from typing import NamedTuple

from grcal.infra.constants import DAY_ABBREVIATIONS


class CalendarDate(NamedTuple):
    """A Gregorian date; month and day are one-based."""

    year: int
    month: int
    day: int

    def isoformat(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def abbreviation(self):
        """Three-letter English name, e.g. 'Mon'."""
        return DAY_ABBREVIATIONS[self.value - 1]
