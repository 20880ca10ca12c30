
from .dateparse import DateParser
from .intparse import IntParser

__all__ = [
    "IntParser",
    "DateParser",
]
