"""
Law checks
==========

Associativity and identity cannot be enforced by the type system, so they
are checked against sample values. Every check returns
``Result[None, LawViolation]``: ``Ok(None)`` when the law held for all
operands, otherwise the first counterexample.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from kungfu import Error, Ok, Result

from ._errors import LawViolation
from ._types import Monoid, Semigroup

ASSOCIATIVITY = "associativity"
LEFT_IDENTITY = "left identity"
RIGHT_IDENTITY = "right identity"


def check_associativity[S: Semigroup](a: S, b: S, c: S) -> Result[None, LawViolation]:
    if a.combine(b.combine(c)) == a.combine(b).combine(c):
        return Ok(None)
    return Error(LawViolation(ASSOCIATIVITY, a, b, c))


def check_left_identity[M: Monoid](monoid: type[M], a: M) -> Result[None, LawViolation]:
    if monoid.identity().combine(a) == a:
        return Ok(None)
    return Error(LawViolation(LEFT_IDENTITY, a))


def check_right_identity[M: Monoid](monoid: type[M], a: M) -> Result[None, LawViolation]:
    if a.combine(monoid.identity()) == a:
        return Ok(None)
    return Error(LawViolation(RIGHT_IDENTITY, a))


def check_semigroup[S: Semigroup](samples: Sequence[S]) -> Result[None, LawViolation]:
    """Associativity over every ordered triple drawn from ``samples``."""
    for a, b, c in itertools.product(samples, repeat=3):
        match check_associativity(a, b, c):
            case Ok(_):
                continue
            case Error(_) as failed:
                return failed
    return Ok(None)


def check_monoid[M: Monoid](monoid: type[M], samples: Sequence[M]) -> Result[None, LawViolation]:
    """Semigroup laws plus both identity laws for every sample."""
    for a in samples:
        for check in (check_left_identity, check_right_identity):
            match check(monoid, a):
                case Ok(_):
                    continue
                case Error(_) as failed:
                    return failed
    return check_semigroup(samples)


__all__ = (
    "ASSOCIATIVITY",
    "LEFT_IDENTITY",
    "RIGHT_IDENTITY",
    "check_associativity",
    "check_left_identity",
    "check_monoid",
    "check_right_identity",
    "check_semigroup",
)
