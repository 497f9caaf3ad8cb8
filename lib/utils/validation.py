"""Validation helpers."""

from typing import Any


class InvalidInput(ValueError):
    """Raised when a request value fails validation."""


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidInput(message)


def is_integer(value: Any) -> bool:
    """Return ``True`` for JSON numbers with an integral value.

    Booleans are rejected even though ``bool`` subclasses ``int``; floats such
    as ``4.0`` are accepted because JSON does not distinguish them from ``4``.
    """

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def as_int(value: Any, message: str) -> int:
    ensure(is_integer(value), message)
    return int(value)


def as_int_list(value: Any, message: str, *, non_empty: bool = False) -> list[int]:
    ensure(isinstance(value, list), message)
    if non_empty:
        ensure(len(value) > 0, message)
    return [int(v) for v in value if is_integer(v)]
