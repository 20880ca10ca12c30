#grcal\infra\constants.py

"""
infra/constants.py

Immutable calendar constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""

    # Public day offset bounds; offset 0 is 1582-10-15
    day_max = 3074323           # 9999-12-31
    day_unix = 141427           # 1970-01-01, for callers only

    # Offset of 1582-10-15 from proleptic 1200-03-01
    day_offset = 139750
    base_year = 1200
    max_year = 9999

    # Offset 0 is a Friday
    first_monday = 3
    week_length = 7

    month_count = 12
    month_offset = 2            # March-based months lead January-based by two

    long_month_length = 31
    short_month_length = 30
    leap_month_length = 29
    nonleap_month_length = 28

    # Aligned block lengths in days
    qc_days = 146097
    c_days = 36524
    q_days = 1461
    y_days = 365
    y_leap_days = 366

    # Block counts
    qc_c_count = 4
    c_q_count = 25
    q_y_count = 4

    # Block lengths in years
    qc_years = 400
    c_years = 100
    q_years = 4

    # Monday-first weekday abbreviations
    day_abbreviations = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    # CLI parsing bounds (signed 32-bit)
    int32_max = 2147483647
    cli_day_of_month_max = 31

    program_name = "grcal-query"
    usage = "usage: grcal-query OFFSET | YEAR MONTH DAY | YYYY-MM-DD"

    # Exit statuses
    exit_ok = 0
    exit_invalid = 1            # range or validity failure
    exit_usage = 2              # wrong argument count or unparseable argument


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
DAY_MAX = CONSTANTS.day_max
DAY_UNIX = CONSTANTS.day_unix
DAY_ABBREVIATIONS = CONSTANTS.day_abbreviations
PROGRAM_NAME = CONSTANTS.program_name
USAGE = CONSTANTS.usage
