"""Minimal success/failure container returned by the dispatcher handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

_MISSING: Any = object()


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a value (``Result.ok``) or an error (``Result.err``).

    Accessing the side that is not set raises :class:`ValueError`, so callers
    must check :attr:`is_ok` first.
    """

    _value: Any = _MISSING
    _error: Any = _MISSING

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is _MISSING

    @property
    def is_err(self) -> bool:
        return not self.is_ok

    @property
    def value(self) -> T:
        if self.is_err:
            raise ValueError("Called value on Result.err")
        return self._value

    @property
    def error(self) -> E:
        if self.is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error


__all__ = ["Result"]
