"""
Optional value wrapper.

Python's ``None`` cannot tell "no value" apart from "the value is None", so
optional results use an explicit Maybe. An empty Maybe is a failure in the
classification pipeline.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from handle_failure.core.errors import ContractViolationError

T = TypeVar("T")

_EMPTY: Any = object()


class Maybe(Generic[T]):
    """Either holds exactly one value or is empty."""

    __slots__ = ("_value",)

    def __init__(self, value: T = _EMPTY):
        self._value = value

    @classmethod
    def some(cls, value: T) -> Maybe[T]:
        return cls(value)

    @classmethod
    def empty(cls) -> Maybe[T]:
        return cls()

    @classmethod
    def from_nullable(cls, value: T | None) -> Maybe[T]:
        """Empty when ``value`` is None, otherwise holding it."""
        return cls() if value is None else cls(value)

    def has_value(self) -> bool:
        return self._value is not _EMPTY

    def __bool__(self) -> bool:
        return self.has_value()

    @property
    def value(self) -> T:
        """The held value. Accessing it on an empty Maybe is a contract breach."""
        if self._value is _EMPTY:
            raise ContractViolationError("Maybe.value accessed on an empty Maybe")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash((Maybe, self._value))

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "Maybe.empty()"
        return f"Maybe.some({self._value!r})"


__all__ = ["Maybe"]
