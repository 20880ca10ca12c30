"""
core/parser.py

QueryParser: turns command-line arguments into a query.
- One integer         -> OffsetQuery (day offset, range-checked)
- One ISO date        -> DateQuery
- Three integers      -> DateQuery (year/month/day basic range checks)
Anything else raises QueryError with the diagnostic to report.
"""

from typing import NamedTuple

from grcal.infra.constants import CONSTANTS, DAY_MAX
from grcal.infra.errors import QueryError
from grcal.utils.dateparse import DateParser
from grcal.utils.intparse import IntParser


class OffsetQuery(NamedTuple):
    offset: int


class DateQuery(NamedTuple):
    year: int
    month: int
    day: int


class QueryParser:
    """Validates argument shape and basic ranges; full date validity is the engine's job."""

    def parse(self, args):
        """Parse the arguments that follow the program name."""
        if len(args) == 1:
            return self._parse_single(args[0])
        if len(args) == 3:
            return self._parse_triple(args)
        raise QueryError("Wrong number of parameters!", CONSTANTS.exit_usage, show_usage=True)

    def _parse_single(self, token):
        offset = IntParser.parse_int(token)
        if offset is None:
            ymd = DateParser.parse_iso(token)
            if ymd is None:
                raise QueryError("Could not parse parameter!", CONSTANTS.exit_usage)
            return DateQuery(*ymd)

        if not 0 <= offset <= DAY_MAX:
            raise QueryError("Day offset out of range!", CONSTANTS.exit_invalid)
        return OffsetQuery(offset)

    def _parse_triple(self, args):
        values = []
        for name, token in zip(("year", "month", "day"), args):
            v = IntParser.parse_int(token)
            if v is None:
                raise QueryError(f"Could not parse {name}!", CONSTANTS.exit_usage)
            values.append(v)
        year, month, day = values

        # Coarse bounds first; the engine decides month lengths and leap days
        if not 0 <= year <= CONSTANTS.max_year:
            raise QueryError("Year is out of range!", CONSTANTS.exit_invalid)
        if not 1 <= month <= CONSTANTS.month_count:
            raise QueryError("Month is out of range!", CONSTANTS.exit_invalid)
        if not 1 <= day <= CONSTANTS.cli_day_of_month_max:
            raise QueryError("Day is out of range!", CONSTANTS.exit_invalid)

        return DateQuery(year, month, day)
