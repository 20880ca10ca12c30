from .writer import ResultWriter

__all__ = ["ResultWriter"]
