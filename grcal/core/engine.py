"""
core/engine.py

GregorianDayEngine: converts between day offsets and Gregorian dates.

- Day offset 0 is 1582-10-15; DAY_MAX (3074323) is 9999-12-31
- Internally works from proleptic 1200-03-01 with March-based years,
  so the variable-length February is the last month of each year
- offset_to_date / weekday require a valid offset (ContractViolation otherwise)
- date_to_offset is total: invalid input yields None, never an exception
"""

from grcal.core.models import CalendarDate, Weekday
from grcal.infra.constants import CONSTANTS, DAY_MAX
from grcal.infra.errors import ContractViolation, InvalidDate
from grcal.infra.logger import LoggerFactory
from grcal.rules.rules import CalendarRules

log = LoggerFactory.get_logger("grcal.engine")

C = CONSTANTS


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _check_offset(offset):
    if not _is_int(offset) or not 0 <= offset <= DAY_MAX:
        log.debug("day offset out of range: %r", offset)
        raise ContractViolation(f"day offset must be an int in [0, {DAY_MAX}], got {offset!r}")


class GregorianDayEngine:
    """Stateless offset <-> date arithmetic."""

    @staticmethod
    def offset_to_date(offset):
        """Convert a day offset into a CalendarDate(year, month, day)."""
        _check_offset(offset)

        days = offset + C.day_offset

        qc, days = divmod(days, C.qc_days)
        c, days = divmod(days, C.c_days)
        q, days = divmod(days, C.q_days)
        y, d = divmod(days, C.y_days)

        # c == 4 only on the leap day closing a quad century
        if c == C.qc_c_count:
            c = C.qc_c_count - 1
            q = C.c_q_count - 1
            y = C.q_y_count - 1
            d = C.y_leap_days - 1

        # y == 4 only on the leap day closing a quad year
        if y == C.q_y_count:
            y = C.q_y_count - 1
            d = C.y_leap_days - 1

        year = (qc * C.qc_years + c * C.c_years
                + q * C.q_years + y + C.base_year)

        month = 0
        while d > 0:
            ml = CalendarRules.month_length(month)
            if ml is None or d < ml:
                break
            month += 1
            d -= ml

        day = d + 1

        month += C.month_offset
        if month >= C.month_count:
            month -= C.month_count
            year += 1

        return CalendarDate(year, month + 1, day)

    @staticmethod
    def date_to_offset(year, month, day):
        """
        Convert a Gregorian date into a day offset.
        Returns None if the combination is not a supported Gregorian day.
        """
        if not (_is_int(year) and _is_int(month) and _is_int(day)):
            return None

        if year <= C.base_year or month < 1 or day < 1:
            return None
        if year > C.max_year or month > C.month_count:
            return None

        day -= 1

        # Shift to March-based month/year
        month = month - 1 - C.month_offset
        if month < 0:
            year -= 1
            month += C.month_count

        if day >= CalendarRules.resolve_month_length(month, year):
            return None

        qc, rest = divmod(year - C.base_year, C.qc_years)
        c, rest = divmod(rest, C.c_years)
        q, y = divmod(rest, C.q_years)

        offset = qc * C.qc_days + c * C.c_days + q * C.q_days + y * C.y_days

        # February is the last slot, so it never appears in this prefix
        for x in range(month):
            offset += CalendarRules.month_length(x)

        offset += day
        offset -= C.day_offset

        if not 0 <= offset <= DAY_MAX:
            return None
        return offset

    @classmethod
    def is_valid_date(cls, year, month, day):
        """True if (year, month, day) converts to a supported day offset."""
        return cls.date_to_offset(year, month, day) is not None

    @classmethod
    def require_offset(cls, year, month, day):
        """Like date_to_offset, but raises InvalidDate instead of returning None."""
        offset = cls.date_to_offset(year, month, day)
        if offset is None:
            raise InvalidDate(f"not a supported Gregorian date: {year!r}-{month!r}-{day!r}")
        return offset

    @staticmethod
    def weekday(offset):
        """Weekday of a day offset; Weekday.MONDAY == 1 ... Weekday.SUNDAY == 7."""
        _check_offset(offset)
        if offset < C.first_monday:
            offset += C.week_length
        return Weekday((offset - C.first_monday) % C.week_length + 1)
