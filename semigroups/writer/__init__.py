"""
Writer
======

Value-plus-log pairs for traced reductions:
- Log (list monoid accumulator)
- WriterResult (Result[T, E] + log)
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
