"""
Structured error types for handle-failure.

Every exception raised by the library itself (as opposed to exceptions raised
by user-supplied failure handlers) derives from HandleFailureError. Each one
carries a kind for classification, a free-form context dict, and an optional
chained cause.

Manifesto:
    - **One base class:** callers can catch HandleFailureError for anything
      the library raises
    - **Contract breaches are loud:** a broken precondition raises a
      ContractViolationError instead of producing garbage
    - **Serializable:** to_dict() for structured logging

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                     HandleFailureError                        │
        │               (kind, context, cause, to_dict)                 │
        ├──────────────────────────────────────────────────────────────┤
        │                                                                │
        │  UnwrapError          ContractViolationError                   │
        │  (UNWRAP)             (CONTRACT)                               │
        │                            │                                   │
        │                       HandlerReturnedError                     │
        │                       BundleReusedError                        │
        │                                                                │
        │  UnregisteredShapeError                                        │
        │  (REGISTRATION)                                                │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = UnwrapError("Error message : boom. ", description="boom")
    >>> str(error)
    'Error message : boom. '
    >>> error.kind
    <ErrorKind.UNWRAP: 'UNWRAP'>

Tags:
    errors, exception-hierarchy, contract, handle-failure

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """
    Classification of library errors.

    Attributes:
        UNWRAP: A failure escalated by the built-in unwrap handler
        CONTRACT: A caller broke a documented precondition
        REGISTRATION: No classification capability exists for a value
    """

    UNWRAP = "UNWRAP"
    CONTRACT = "CONTRACT"
    REGISTRATION = "REGISTRATION"


class HandleFailureError(Exception):
    """
    Base exception for all handle-failure errors.

    ``str(error)`` is always exactly ``message``; the unwrap diagnostic format
    depends on it.

    Subclasses set ``default_kind`` to classify themselves.
    """

    default_kind: ErrorKind = ErrorKind.CONTRACT

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.context = dict(context) if context else {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> HandleFailureError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ContractViolationError("bad").with_context(shape="tuple")
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "kind": self.kind.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, kind={self.kind.value})"


# =============================================================================
# UNWRAP
# =============================================================================


class UnwrapError(HandleFailureError, RuntimeError):
    """
    Raised by the unwrap handler when a result value is in the failure state.

    The message is ``Error message : <description>. `` optionally followed by
    one ``Context info : <fragments>.`` section per recorded context call.
    """

    default_kind = ErrorKind.UNWRAP

    def __init__(
        self,
        message: str,
        *,
        description: str = "",
        fragments: tuple[Any, ...] = (),
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.description = description
        self.fragments = fragments

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["description"] = self.description
        if self.fragments:
            result["fragments"] = [str(f) for f in self.fragments]
        return result


# =============================================================================
# CONTRACT VIOLATIONS
# =============================================================================


class ContractViolationError(HandleFailureError):
    """A documented precondition of the pipeline was broken by the caller."""

    default_kind = ErrorKind.CONTRACT


class HandlerReturnedError(ContractViolationError):
    """A failure handler returned normally for a payload-carrying shape."""

    def __init__(self, handler: Any, shape: type, description: str):
        name = getattr(handler, "__qualname__", None) or type(handler).__qualname__
        super().__init__(
            f"Failure handler {name!r} returned normally for payload-carrying "
            f"shape {shape.__name__!r}; handlers must raise",
            context={"handler": name, "shape": shape.__name__, "description": description},
        )
        self.handler = handler
        self.shape = shape
        self.description = description


class BundleReusedError(ContractViolationError):
    """A FailureContext was applied to more than one result value."""


# =============================================================================
# REGISTRATION
# =============================================================================


class UnregisteredShapeError(HandleFailureError, TypeError):
    """No classification capability is registered for a value's shape."""

    default_kind = ErrorKind.REGISTRATION

    def __init__(self, value: Any, message: str | None = None):
        shape = type(value)
        if message is None:
            message = f"No error traits registered for shape {shape.__qualname__!r}"
            if isinstance(value, tuple):
                message += f" of arity {len(value)}"
        super().__init__(message, context={"shape": shape.__qualname__})
        self.shape = shape


__all__ = [
    "ErrorKind",
    "HandleFailureError",
    "UnwrapError",
    "ContractViolationError",
    "HandlerReturnedError",
    "BundleReusedError",
    "UnregisteredShapeError",
]
