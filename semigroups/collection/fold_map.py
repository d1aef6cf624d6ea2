"""Map-then-reduce."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._types import Direction, Semigroup
from .reduce import reduce_all


def fold_map[A, S: Semigroup](
    values: Iterable[A],
    f: Callable[[A], S],
    /,
    *,
    of: type[S] | None = None,
    direction: Direction = "left",
) -> S:
    """
    Lift every item into a semigroup with ``f`` and combine the results.

    Example:
        fold_map(["a", "bb"], lambda s: Sum(len(s)), of=Sum)  # Sum(3)
    """
    return reduce_all([f(v) for v in values], of=of, direction=direction)


__all__ = ("fold_map",)
