"""
Numeric monoids
===============

Numbers form a monoid in more than one way, so each one gets a wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sum[N: (int, float)]:
    """Addition, identity ``Sum(0)``. Float sums are associative only up to rounding."""

    value: N

    @classmethod
    def identity(cls) -> Sum[int]:
        return Sum(0)

    def combine(self, other: Sum[N], /) -> Sum[N]:
        return Sum(self.value + other.value)


@dataclass(frozen=True, slots=True)
class Product[N: (int, float)]:
    """Multiplication, identity ``Product(1)``."""

    value: N

    @classmethod
    def identity(cls) -> Product[int]:
        return Product(1)

    def combine(self, other: Product[N], /) -> Product[N]:
        return Product(self.value * other.value)


__all__ = ("Product", "Sum")
