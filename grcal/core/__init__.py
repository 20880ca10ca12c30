from .engine import GregorianDayEngine
from .parser import DateQuery, OffsetQuery, QueryParser
from .models import CalendarDate, Weekday

__all__ = [
    "GregorianDayEngine",
    "CalendarDate",
    "Weekday",
    "QueryParser",
    "OffsetQuery",
    "DateQuery",
]
