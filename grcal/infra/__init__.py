#grcal\infra\__init__.py

from .constants import (CONSTANTS, DAY_ABBREVIATIONS, DAY_MAX, DAY_UNIX,
                        PROGRAM_NAME, USAGE)
from .errors import ContractViolation, GrcalError, InvalidDate, QueryError
from .logger import LoggerFactory

__all__ = [
    "LoggerFactory",
    "CONSTANTS",
    "DAY_MAX",
    "DAY_UNIX",
    "DAY_ABBREVIATIONS",
    "PROGRAM_NAME",
    "USAGE",
    "GrcalError",
    "ContractViolation",
    "InvalidDate",
    "QueryError",
]
