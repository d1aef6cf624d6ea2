from __future__ import annotations

import typing


class EmptyInputError(Exception):
    """Nothing to combine and no identity to fall back on."""

    type_name: str | None

    def __init__(self, type_name: str | None = None) -> None:
        self.type_name = type_name
        if type_name is None:
            super().__init__("Cannot reduce an empty sequence without an identity")
        else:
            super().__init__(f"Cannot reduce an empty sequence of {type_name}: no identity")


class LawViolation(Exception):
    """An algebraic law did not hold for the given operands."""

    law: str
    operands: tuple[typing.Any, ...]

    def __init__(self, law: str, *operands: typing.Any) -> None:
        self.law = law
        self.operands = operands
        args = ", ".join(repr(o) for o in operands)
        super().__init__(f"{law} law violated for ({args})")


__all__ = ("EmptyInputError", "LawViolation")
