"""
Selection semigroups
====================

Combining picks one operand. None of these has an identity: reducing an
empty sequence of them raises ``EmptyInputError``.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass


class _Ordered(typing.Protocol):
    def __lt__(self, other: typing.Any, /) -> bool: ...


@dataclass(frozen=True, slots=True)
class Min[T: _Ordered]:
    """Smaller operand; ties keep the left one."""

    value: T

    def combine(self, other: Min[T], /) -> Min[T]:
        return other if other.value < self.value else self


@dataclass(frozen=True, slots=True)
class Max[T: _Ordered]:
    """Larger operand; ties keep the left one."""

    value: T

    def combine(self, other: Max[T], /) -> Max[T]:
        return other if self.value < other.value else self


@dataclass(frozen=True, slots=True)
class First[T]:
    value: T

    def combine(self, other: First[T], /) -> First[T]:
        _ = other
        return self


@dataclass(frozen=True, slots=True)
class Last[T]:
    value: T

    def combine(self, other: Last[T], /) -> Last[T]:
        return other


__all__ = ("First", "Last", "Max", "Min")
