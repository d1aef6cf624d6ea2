"""
Reduce combinators
==================

Collapsing a sequence of combinable values into one.

Every variant shares the same rules:
- with an identity (``of=`` a monoid type, or ``empty=``) the fold is seeded
  with it and empty input yields the identity;
- without one the first element is the seed and empty input is an
  ``EmptyInputError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import EmptyInputError
from .._types import DIRECTIONS, Combine, Direction, Empty, Semigroup, has_identity
from ..writer import Log, WriterResult


def combine[S: Semigroup](a: S, b: S, /) -> S:
    """Combine two values of the same semigroup."""
    return a.combine(b)


def _method_combine[S: Semigroup](a: S, b: S) -> S:
    return a.combine(b)


def _check_direction(direction: str, caller: str) -> None:
    if direction not in DIRECTIONS:
        raise ValueError(f"{caller}(): direction must be 'left' or 'right', got {direction!r}")


def _identity_of[S: Semigroup](of: type[S] | None) -> Empty[S] | None:
    if of is not None and has_identity(of):
        return of.identity  # type: ignore[attr-defined]
    return None


def _type_name(of: type | None) -> str | None:
    return None if of is None else of.__name__


# ============================================================================
# Generic combinator (explicit combine + empty)
# ============================================================================


def _reduce[T](
    items: Sequence[T],
    op: Combine[T],
    empty: Empty[T] | None,
    direction: Direction,
    type_name: str | None,
) -> Result[T, EmptyInputError]:
    if empty is not None:
        acc = empty()
        rest: Sequence[T] = items
    elif not items:
        return Error(EmptyInputError(type_name))
    elif direction == "left":
        acc, rest = items[0], items[1:]
    else:
        acc, rest = items[-1], items[:-1]

    match direction:
        case "left":
            for item in rest:
                acc = op(acc, item)
        case "right":
            for item in reversed(rest):
                acc = op(item, acc)
        case _ as unreachable:
            assert_never(unreachable)

    return Ok(acc)


def reduceM[T](
    values: Iterable[T],
    *,
    combine: Combine[T],
    empty: Empty[T] | None = None,
    direction: Direction = "left",
) -> T:
    """
    Generic reduce for types outside the protocols.

    Example:
        reduceM([1, 2, 3], combine=operator.add, empty=lambda: 0)  # 6
    """
    _check_direction(direction, "reduceM")
    match _reduce(list(values), combine, empty, direction, None):
        case Ok(value):
            return value
        case Error(err):
            raise err
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Sugar for Semigroup / Monoid values
# ============================================================================


def try_reduce_all[S: Semigroup](
    values: Iterable[S],
    /,
    *,
    of: type[S] | None = None,
    direction: Direction = "left",
) -> Result[S, EmptyInputError]:
    """Like ``reduce_all`` but returns ``Error`` instead of raising."""
    _check_direction(direction, "try_reduce_all")
    return _reduce(list(values), _method_combine, _identity_of(of), direction, _type_name(of))


def reduce_all[S: Semigroup](
    values: Iterable[S],
    /,
    *,
    of: type[S] | None = None,
    direction: Direction = "left",
) -> S:
    """
    Combine all values into one.

    ``of`` names the element type; when it is a monoid the reduction is
    total and ``reduce_all([], of=T) == T.identity()``.

    Raises:
        EmptyInputError: ``values`` is empty and no identity is available.
    """
    _check_direction(direction, "reduce_all")
    match _reduce(list(values), _method_combine, _identity_of(of), direction, _type_name(of)):
        case Ok(value):
            return value
        case Error(err):
            raise err
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Sugar for Writer
# ============================================================================


def reduce_all_w[S: Semigroup](
    values: Iterable[S],
    /,
    *,
    of: type[S] | None = None,
    direction: Direction = "left",
) -> WriterResult[S, EmptyInputError, Log[str]]:
    """Reduce, recording every combine step in the log."""
    _check_direction(direction, "reduce_all_w")
    log: Log[str] = Log.identity()

    def step(a: S, b: S) -> S:
        nonlocal log
        out = a.combine(b)
        log = log.tell(f"{a!r} <> {b!r} = {out!r}")
        return out

    empty = _identity_of(of)

    def seed() -> S:
        nonlocal log
        assert empty is not None
        value = empty()
        log = log.tell(f"identity() = {value!r}")
        return value

    result = _reduce(list(values), step, None if empty is None else seed, direction, _type_name(of))
    return WriterResult(result, log)


__all__ = ("combine", "reduce_all", "reduce_all_w", "reduceM", "try_reduce_all")
