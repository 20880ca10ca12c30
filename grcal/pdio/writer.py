"""
pdio/writer.py
Result writer for query output.

Responsibilities:
- Dates as 'YYYY-MM-DD Www'
- Offsets as a plain integer
- One result per line on stdout (or a given stream)
"""

import sys


class ResultWriter:
    """Line-oriented writer for successful query results."""

    def __init__(self, stream=None):
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def format_date(self, date, weekday):
        return f"{date.isoformat()} {weekday.abbreviation}"

    def write_date(self, date, weekday):
        """Write a CalendarDate and its Weekday; returns the line written."""
        line = self.format_date(date, weekday)
        self.stream.write(line + "\n")
        return line

    def write_offset(self, offset):
        line = str(offset)
        self.stream.write(line + "\n")
        return line
