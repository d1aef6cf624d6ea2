"""
Core type definitions for semigroups.

Capabilities and aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Capabilities
# ============================================================================


@typing.runtime_checkable
class Semigroup(typing.Protocol):
    """
    A value with an associative binary ``combine``.

    Law (cannot be checked statically, see ``semigroups.laws``):
    - Associativity: a.combine(b.combine(c)) == a.combine(b).combine(c)
    """

    def combine(self, other: typing.Self, /) -> typing.Self: ...


@typing.runtime_checkable
class Monoid(Semigroup, typing.Protocol):
    """
    A semigroup with an identity element.

    Laws:
    - Left identity: T.identity().combine(a) == a
    - Right identity: a.combine(T.identity()) == a
    """

    @classmethod
    def identity(cls) -> typing.Self: ...


# ============================================================================
# Type aliases
# ============================================================================

# Combine = explicit binary operation for types outside the protocols
type Combine[T] = Callable[[T, T], T]

# Empty = nullary identity factory
type Empty[T] = Callable[[], T]

# Direction = fold traversal order; associativity makes it unobservable
type Direction = typing.Literal["left", "right"]

DIRECTIONS: tuple[str, ...] = ("left", "right")


def has_identity(tp: type) -> bool:
    """Whether ``tp`` supplies a callable ``identity()``."""
    return callable(getattr(tp, "identity", None))


__all__ = (
    # Capabilities
    "Semigroup",
    "Monoid",
    # Type aliases
    "Combine",
    "Empty",
    "Direction",
    "DIRECTIONS",
    # Helpers
    "has_identity",
)
