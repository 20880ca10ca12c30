from .patterns import INT_TOKEN, ISO_DATE_TOKEN

__all__ = [
    "INT_TOKEN",
    "ISO_DATE_TOKEN",
]
