#grcal\utils\intparse.py

from grcal.infra.constants import CONSTANTS
from grcal.patterns.patterns import INT_TOKEN


class IntParser:
    """Strict signed integer parsing for command-line arguments."""

    @staticmethod
    def parse_int(token):
        """
        Parse ``token`` as a signed integer, or return None.
        - Optional single '+' or '-', then at least one ASCII digit
        - No surrounding whitespace
        - Magnitude must fit a signed 32-bit int (the most negative value is rejected)
        """
        m = INT_TOKEN.fullmatch(token)
        if not m:
            return None
        sign, digits = m.group(1), m.group(2).lstrip("0") or "0"
        if len(digits) > len(str(CONSTANTS.int32_max)):
            return None  # overflow, and too long for int()
        value = int(digits)
        if value > CONSTANTS.int32_max:
            return None  # overflow
        return -value if sign == "-" else value
