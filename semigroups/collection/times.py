"""Repeated combination of a single value."""

from __future__ import annotations

from .._errors import EmptyInputError
from .._types import Semigroup, has_identity


def combine_n[S: Semigroup](value: S, n: int) -> S:
    """
    ``value`` combined with itself ``n`` times (Haskell's stimes).

    Uses repeated doubling, so only O(log n) combines are performed.
    ``n == 0`` is the identity, which only monoids have.
    """
    if n < 0:
        raise ValueError(f"combine_n(): n must be >= 0, got {n}")
    if n == 0:
        tp = type(value)
        if not has_identity(tp):
            raise EmptyInputError(tp.__name__)
        return tp.identity()  # type: ignore[attr-defined]

    result: S | None = None
    base = value
    while True:
        if n & 1:
            result = base if result is None else result.combine(base)
        n >>= 1
        if not n:
            break
        base = base.combine(base)
    assert result is not None
    return result


__all__ = ("combine_n",)
