"""
Classification capability for result shapes.

A *result shape* is any concrete representation of a fallible outcome: a
Maybe, a ``(value, ErrorCode)`` pair, an Ok/Err, a bare ErrorCode. To flow
through the failure-handling pipeline a shape needs an ErrorTraits
implementation answering four questions about its values.

Manifesto:
    - **Classification is delegated:** the pipeline never decides what a
      failure *means*; the shape's traits do
    - **Resolved per shape, not per value:** lookups are keyed by concrete
      type (and tuple arity) and cached
    - **Closed tuple arities:** tuples of 2, 3 and 4 elements are built in;
      any other arity is one more explicit registration

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     ErrorTraits[S, P]                        │
        ├─────────────────────────────────────────────────────────────┤
        │  carries_payload: bool        (class-level, static)          │
        │  is_failure(value) -> bool    (pure)                         │
        │  describe_failure(value) -> str   (only when failing)        │
        │  take_payload(value) -> P     (only when NOT failing)        │
        │  matches(value) -> bool       (structural refinement)        │
        └─────────────────────────────────────────────────────────────┘
                               ▲
                               │ lookup((type(value), arity))
        ┌─────────────────────────────────────────────────────────────┐
        │                      TraitsRegistry                          │
        │  (shape, arity|None) -> ErrorTraits      + per-key cache     │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Registering a new shape:

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class HttpReply:
    ...     status: int
    ...     body: bytes
    >>> @register_traits(HttpReply)
    ... class HttpReplyTraits(ErrorTraits):
    ...     carries_payload = True
    ...     def is_failure(self, value):
    ...         return value.status >= 400
    ...     def take_payload(self, value):
    ...         return value.body
    ...     def describe_failure(self, value):
    ...         return f"HTTP status {value.status}"
    >>> traits_for(HttpReply(404, b"")).describe_failure(HttpReply(404, b""))
    'HTTP status 404'

Guardrails:
    ❌ DON'T: Call take_payload without is_failure having returned False
    ✅ DO: Let the combinator drive the traits

    ❌ DON'T: Make carries_payload depend on the instance
    ✅ DO: Declare it once as a class attribute

Tags:
    traits, classification, registry, result-shape, handle-failure

Doc-Types:
    - API Reference
    - Extension Guide
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar

from handle_failure.core.errors import ContractViolationError, UnregisteredShapeError

S = TypeVar("S")
P = TypeVar("P")


class ErrorTraits(ABC, Generic[S, P]):
    """
    The four-operation classification contract for one result shape.

    Subclasses must set ``carries_payload``. When it is False the shape has no
    payload (a bare status code) and ``take_payload`` is never called.
    """

    carries_payload: ClassVar[bool]

    def matches(self, value: S) -> bool:
        """Refine a type/arity match structurally. Defaults to accepting."""
        return True

    @abstractmethod
    def is_failure(self, value: S) -> bool:
        """True when ``value`` is in the failure state. Must be side-effect free."""

    @abstractmethod
    def describe_failure(self, value: S) -> str:
        """Human-readable description of the failure; only called on failure."""

    def take_payload(self, value: S) -> P:
        """
        Return the payload of a successful value.

        Precondition: ``is_failure(value)`` returned False for this value.
        Calling it on a failing value is a contract violation.
        """
        raise ContractViolationError(f"{type(self).__name__} carries no payload")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class ShapeInfo:
    """One row of the registry, for introspection."""

    shape: type
    arity: int | None
    traits: ErrorTraits
    carries_payload: bool

    @property
    def name(self) -> str:
        if self.arity is None:
            return self.shape.__qualname__
        return f"{self.shape.__qualname__}[{self.arity}]"


class TraitsRegistry:
    """
    Maps result shapes to their ErrorTraits.

    Keys are ``(shape, arity)``; ``arity`` is only meaningful for tuple shapes,
    where one Python type covers several result shapes. A lookup walks the
    value's MRO so subclasses inherit their base's traits; the candidates found
    for a ``(type, arity)`` key are cached.
    """

    def __init__(self) -> None:
        self._traits: dict[tuple[type, int | None], ErrorTraits] = {}
        self._cache: dict[tuple[type, int | None], tuple[ErrorTraits, ...]] = {}

    def register(self, shape: type, traits: ErrorTraits, *, arity: int | None = None) -> None:
        """Register ``traits`` for ``shape`` (and ``arity`` when ``shape`` is a tuple type)."""
        if arity is not None and not issubclass(shape, tuple):
            raise ValueError(f"arity only applies to tuple shapes, not {shape.__qualname__}")
        if not isinstance(getattr(type(traits), "carries_payload", None), bool):
            raise TypeError(f"{type(traits).__qualname__} must declare carries_payload as a bool")
        self._traits[(shape, arity)] = traits
        self._cache.clear()

    def unregister(self, shape: type, *, arity: int | None = None) -> None:
        self._traits.pop((shape, arity), None)
        self._cache.clear()

    def _candidates(self, cls: type, arity: int | None) -> tuple[ErrorTraits, ...]:
        found: list[ErrorTraits] = []
        for base in cls.__mro__:
            if arity is not None:
                traits = self._traits.get((base, arity))
                if traits is not None:
                    found.append(traits)
            traits = self._traits.get((base, None))
            if traits is not None:
                found.append(traits)
        return tuple(found)

    def lookup(self, value: Any) -> ErrorTraits:
        """Return the traits for ``value`` or raise UnregisteredShapeError."""
        cls = type(value)
        key = (cls, len(value) if isinstance(value, tuple) else None)
        candidates = self._cache.get(key)
        if candidates is None:
            candidates = self._cache[key] = self._candidates(*key)
        for traits in candidates:
            if traits.matches(value):
                return traits
        raise UnregisteredShapeError(value)

    def shapes(self) -> list[ShapeInfo]:
        """List registered shapes in registration order."""
        return [
            ShapeInfo(shape, arity, traits, type(traits).carries_payload)
            for (shape, arity), traits in self._traits.items()
        ]

    def __contains__(self, key: type | tuple[type, int | None]) -> bool:
        if isinstance(key, tuple):
            return key in self._traits
        return (key, None) in self._traits


# Global registry
traits_registry = TraitsRegistry()


def register_traits(
    shape: type,
    *,
    arity: int | None = None,
    registry: TraitsRegistry | None = None,
) -> Callable[[type[ErrorTraits]], type[ErrorTraits]]:
    """Class decorator: instantiate an ErrorTraits subclass and register it."""

    def decorator(traits_cls: type[ErrorTraits]) -> type[ErrorTraits]:
        (registry or traits_registry).register(shape, traits_cls(), arity=arity)
        return traits_cls

    return decorator


def traits_for(value: Any) -> ErrorTraits:
    """Look up the traits for ``value`` in the global registry."""
    return traits_registry.lookup(value)


def registered_shapes() -> list[ShapeInfo]:
    return traits_registry.shapes()


__all__ = [
    "ErrorTraits",
    "ShapeInfo",
    "TraitsRegistry",
    "traits_registry",
    "register_traits",
    "traits_for",
    "registered_shapes",
]
