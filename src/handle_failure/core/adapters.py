"""
Built-in ErrorTraits for the common result shapes.

| Shape                      | Failure when     | Payload        |
|----------------------------|------------------|----------------|
| Maybe                      | empty            | held value     |
| StatusPair(value, status)  | status non-zero  | value          |
| (value, status)            | status non-zero  | value          |
| (v1, v2, status)           | status non-zero  | (v1, v2)       |
| (v1, v2, v3, status)       | status non-zero  | (v1, v2, v3)   |
| ErrorCode                  | non-zero         | (none)         |
| Ok / Err                   | Err              | Ok.value       |

Status descriptions read ``From error category '<category>' : <message>``.
Tuple arities are written out one by one; register another adapter for any
other arity.

Importing this module registers every adapter with the global registry.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from handle_failure.core.errors import ContractViolationError
from handle_failure.core.maybe import Maybe
from handle_failure.core.result import Err, Ok
from handle_failure.core.status import ErrorCode
from handle_failure.core.traits import ErrorTraits, register_traits

EMPTY_OPTIONAL_INFO = "Tried to unwrap empty optional"


class StatusPair(NamedTuple):
    """A value with the status of the operation that produced it."""

    value: Any
    status: ErrorCode


def describe_status(code: ErrorCode) -> str:
    return f"From error category '{code.category.name}' : {code.message()}"


# Maybe.


@register_traits(Maybe)
class MaybeTraits(ErrorTraits[Maybe, Any]):
    carries_payload = True

    def is_failure(self, value: Maybe) -> bool:
        return not value.has_value()

    def take_payload(self, value: Maybe) -> Any:
        if not value.has_value():
            raise ContractViolationError("take_payload called on an empty Maybe")
        return value.value

    def describe_failure(self, value: Maybe) -> str:
        return EMPTY_OPTIONAL_INFO


# ErrorCode.


@register_traits(ErrorCode)
class ErrorCodeTraits(ErrorTraits[ErrorCode, None]):
    carries_payload = False

    def is_failure(self, value: ErrorCode) -> bool:
        return bool(value)

    def describe_failure(self, value: ErrorCode) -> str:
        return describe_status(value)


# Tuples with a trailing ErrorCode.


class _TrailingStatusTraits(ErrorTraits[tuple, Any]):
    carries_payload = True

    def matches(self, value: tuple) -> bool:
        return isinstance(value[-1], ErrorCode)

    def is_failure(self, value: tuple) -> bool:
        return bool(value[-1])

    def describe_failure(self, value: tuple) -> str:
        return describe_status(value[-1])


@register_traits(StatusPair, arity=2)
@register_traits(tuple, arity=2)
class ValueAndStatusTraits(_TrailingStatusTraits):
    def take_payload(self, value: tuple) -> Any:
        return value[0]


@register_traits(tuple, arity=3)
class TwoValuesAndStatusTraits(_TrailingStatusTraits):
    def take_payload(self, value: tuple) -> tuple[Any, Any]:
        return (value[0], value[1])


@register_traits(tuple, arity=4)
class ThreeValuesAndStatusTraits(_TrailingStatusTraits):
    def take_payload(self, value: tuple) -> tuple[Any, Any, Any]:
        return (value[0], value[1], value[2])


# Ok / Err.


class ResultTraits(ErrorTraits[Any, Any]):
    carries_payload = True

    def is_failure(self, value: Ok | Err) -> bool:
        return value.is_err()

    def take_payload(self, value: Ok | Err) -> Any:
        if value.is_err():
            raise ContractViolationError("take_payload called on an Err")
        return value.value

    def describe_failure(self, value: Err) -> str:
        return f"From exception '{type(value.error).__name__}' : {value.error}"


register_traits(Ok)(ResultTraits)
register_traits(Err)(ResultTraits)


__all__ = [
    "EMPTY_OPTIONAL_INFO",
    "StatusPair",
    "describe_status",
    "MaybeTraits",
    "ErrorCodeTraits",
    "ValueAndStatusTraits",
    "TwoValuesAndStatusTraits",
    "ThreeValuesAndStatusTraits",
    "ResultTraits",
]
