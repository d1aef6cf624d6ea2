"""
Log - list monoid used as the Writer accumulator
================================================
"""

from __future__ import annotations

import typing


class Log[A](list[A]):
    """
    Append-only log of entries.

    A monoid under concatenation:
    - identity: the empty log
    - combine: ``self`` followed by ``other``

    Neither operand is mutated; every operation returns a fresh Log.
    """

    @classmethod
    def identity(cls) -> typing.Self:
        return cls()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Same as ``self.combine(Log.of(item))``."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


__all__ = ("Log",)
