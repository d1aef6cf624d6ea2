"""
Point2D - additive points
=========================
"""

from __future__ import annotations

import typing
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point2D:
    """
    Integer point combined by componentwise addition.

    Monoid laws hold because ``+`` on ``int`` is associative with ``0`` as
    identity. Python ints are unbounded, so combining never overflows.

    Example:
        Point2D(1, 2).combine(Point2D(2, 3))  # Point2D(x=3, y=5)
    """

    x: int
    y: int

    @classmethod
    def identity(cls) -> typing.Self:
        return cls(0, 0)

    def combine(self, other: Point2D, /) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)


__all__ = ("Point2D",)
