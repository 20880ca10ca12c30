"""
ISO calendar date parsing for the single-argument query form.
- DateParser.parse_iso(token) -> (year, month, day) or None
"""

from dateutil import parser as dateparser

from grcal.patterns.patterns import ISO_DATE_TOKEN


class DateParser:
    """YYYY-MM-DD token -> (year, month, day)."""

    @staticmethod
    def _looks_like_iso(token):
        return ISO_DATE_TOKEN.fullmatch(token) is not None

    @classmethod
    def parse_iso(cls, token):
        """
        Parse an extended ISO-8601 calendar date (date part only).
        Returns None when the token is not of that shape or names no real day.
        """
        if not cls._looks_like_iso(token):
            return None
        try:
            dt = dateparser.isoparse(token)
        except ValueError:
            return None
        return dt.year, dt.month, dt.day
