"""
Result envelope: Ok[T] for success, Err[T] for failure.

Ok/Err is one more result shape the classification pipeline understands, next
to Maybe and status-code tuples. It is the natural return type for Python code
that wants to report expected failures without raising, while still letting
call sites escalate with ``>> unwrap_lazy(...)`` when a failure is fatal to them.

Examples:
    >>> from handle_failure.core.result import Ok, Err, try_result
    >>> Ok(3).expect("loading config")
    3
    >>> try_result(lambda: int("x")).is_err()
    True

Guardrails:
    ❌ DON'T: Store mutable values in Ok (frozen dataclass)
    ✅ DO: Use immutable types or create copies

Tags:
    result-pattern, ok-err, handle-failure
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from handle_failure.core.maybe import Maybe

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def expect(self, *fragments: Any) -> T:
        """Return the value; on Err this raises UnwrapError with ``fragments`` as context."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """Failed result containing an exception."""

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def expect(self, *fragments: Any) -> T:
        """Escalate through the unwrap handler; never returns."""
        from handle_failure.core.unwrap import unwrap_with

        return self >> unwrap_with(*fragments)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[T]]


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Run ``f`` and capture its outcome.

    Only ``Exception`` subclasses are captured; KeyboardInterrupt and
    SystemExit propagate.
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


def from_maybe(maybe: Maybe[T], error: Exception) -> Result[T]:
    """Ok with the held value, or Err(error) when ``maybe`` is empty."""
    if maybe.has_value():
        return Ok(maybe.value)
    return Err(error)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "try_result",
    "from_maybe",
]
