#main.py
"""

CLI entrypoint:
- grcal-query OFFSET          -> prints 'YYYY-MM-DD Www'
- grcal-query YEAR MONTH DAY  -> prints the day offset
- grcal-query YYYY-MM-DD      -> prints the day offset
- Diagnostics are logged to stderr

Exit codes:
 0 = success
 1 = offset or date out of range / not a valid date
 2 = wrong number of arguments or unparseable argument
"""

import sys

from grcal.core.engine import GregorianDayEngine
from grcal.core.parser import OffsetQuery, QueryParser
from grcal.infra.constants import CONSTANTS, PROGRAM_NAME, USAGE
from grcal.infra.errors import QueryError
from grcal.infra.logger import LoggerFactory
from grcal.pdio.writer import ResultWriter

log = LoggerFactory.get_logger("grcal.main")


def _run_query(query, writer):
    if isinstance(query, OffsetQuery):
        date = GregorianDayEngine.offset_to_date(query.offset)
        wkday = GregorianDayEngine.weekday(query.offset)
        return writer.write_date(date, wkday)

    offset = GregorianDayEngine.date_to_offset(query.year, query.month, query.day)
    if offset is None:
        raise QueryError("Date is not valid!", CONSTANTS.exit_invalid)
    return writer.write_offset(offset)


def main(argv, writer=None):
    """Run one query; ``argv`` includes the program name. Returns the exit status."""
    writer = writer if writer else ResultWriter()
    try:
        query = QueryParser().parse(argv[1:])
        line = _run_query(query, writer)
    except QueryError as e:
        log.error("%s: %s", PROGRAM_NAME, e.message)
        if e.show_usage:
            log.error(USAGE)
        return e.exit_status

    log.debug("%s -> %s", " ".join(argv[1:]), line)
    return CONSTANTS.exit_ok


def run():
    """Console-script entry point."""
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
