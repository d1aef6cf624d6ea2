"""
Semigroups and monoids for plain Python values.

A value is combinable when it has an associative ``combine``; it is a
monoid when its type also offers ``identity()``. On top of those two
capabilities the library derives reductions, repetition and law checks.

Architecture:
- Capabilities are protocols (Semigroup, Monoid), not base classes
- Derived operations are free functions (reduce_all, combine_n, fold_map)
- Generic variants (*M functions) take an explicit combine + empty
- Writer variants (*_w suffix) return the value together with a Log of steps
"""

# Core types
from ._types import Combine, Direction, Empty, Monoid, Semigroup

# Reductions
from .collection import (
    # Semigroup / Monoid
    combine,
    combine_n,
    fold_map,
    reduce_all,
    try_reduce_all,
    # Writer
    reduce_all_w,
    # Generic
    reduceM,
)

# Instances
from .instances import First, Last, Max, Min, Point2D, Product, Sum

# Law checks
from . import laws

# Writer
from . import writer
from .writer import Log, WriterResult

# Errors
from ._errors import EmptyInputError, LawViolation

__all__ = (
    # Types
    "Combine",
    "Direction",
    "Empty",
    "Monoid",
    "Semigroup",
    # Reductions
    "combine",
    "combine_n",
    "fold_map",
    "reduce_all",
    "try_reduce_all",
    "reduce_all_w",
    "reduceM",
    # Instances
    "First",
    "Last",
    "Max",
    "Min",
    "Point2D",
    "Product",
    "Sum",
    # Laws
    "laws",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    # Errors
    "EmptyInputError",
    "LawViolation",
)
