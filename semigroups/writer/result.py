"""
WriterResult - outcome of a traced reduction
============================================
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result


class WriterResult[T, E, W]:
    """
    A ``Result[T, E]`` paired with the log ``W`` written while producing it.

    The log is kept on both branches: a failed reduction still reports
    whatever steps ran before it stopped.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    @property
    def is_ok(self) -> bool:
        match self._result:
            case Ok(_):
                return True
            case Error(_):
                return False
            case _ as unreachable:
                assert_never(unreachable)

    def unwrap(self) -> T:
        """Value on success; raises the stored error otherwise."""
        match self._result:
            case Ok(value):
                return value
            case Error(err):
                if isinstance(err, BaseException):
                    raise err
                raise ValueError(f"WriterResult holds an error: {err!r}")
            case _ as unreachable:
                assert_never(unreachable)

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
