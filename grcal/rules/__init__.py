from .rules import MONTH_PATTERN, CalendarRules, MonthKind

__all__ = [
    "CalendarRules",
    "MonthKind",
    "MONTH_PATTERN",
]
