"""
Failure contexts and the chaining combinator.

``handle_failure(handler, *args)`` captures a failure handler and the extra
arguments it should receive; ``result >> context`` classifies ``result`` and
either returns its payload or calls ``handler(description, *args)``.

Manifesto:
    - **Success costs nothing extra:** one registry lookup (cached), one
      predicate, one extraction. No formatting, no logging, no settings lookup
    - **Failure is the cold path:** everything else lives in
      FailureContext._trigger_failure
    - **Handlers diverge:** a handler bound to a payload-carrying shape must
      raise. If it returns, HandlerReturnedError is raised instead of
      extracting a payload from a failed value

Architecture:
    ::

        producer() ──► result ──►  result >> handle_failure(handler, *args)
                                              │
                                traits = traits_for(result)
                                              │
                           ┌──── traits.is_failure(result) ────┐
                           │ False                        True │
                           ▼                                   ▼
                traits.take_payload(result)     handler(traits.describe_failure(result), *args)
                  (None if no payload)                         │
                                                   raises ──► propagates to caller
                                                   returns ─► None       (no payload)
                                                              HandlerReturnedError (payload)

Examples:
    >>> from handle_failure import Maybe, handle_failure
    >>> def fail(info, where):
    ...     raise LookupError(f"{where}: {info}")
    >>> Maybe.some(1) >> handle_failure(fail, "config")
    1
    >>> Maybe.empty() >> handle_failure(fail, "config")
    Traceback (most recent call last):
    ...
    LookupError: config: Tried to unwrap empty optional

Guardrails:
    ❌ DON'T: Store a FailureContext and apply it twice
    ✅ DO: Build it inline: ``value >> handle_failure(h, ...)``

    ❌ DON'T: Return normally from a handler bound to a payload-carrying shape
    ✅ DO: Raise (or use unwrap(), which always raises)

Tags:
    combinator, failure-handling, error-traits, handle-failure

Doc-Types:
    - API Reference
    - Usage Guide
"""

from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar

from handle_failure.core import adapters as _adapters  # noqa: F401  (registers built-in shapes)
from handle_failure.core.errors import BundleReusedError, HandlerReturnedError
from handle_failure.core.logging import get_logger
from handle_failure.core.settings import get_settings
from handle_failure.core.traits import ErrorTraits, TraitsRegistry, traits_registry

logger = get_logger(__name__)

# Invoked as handler(description, *args). Handlers bound to payload-carrying
# shapes must raise; for a bare ErrorCode a handler may return and >> yields None.
FailureHandler = Callable[..., NoReturn]

H = TypeVar("H", bound=FailureHandler)


class FailureContext(Generic[H]):
    """
    A failure handler plus the extra arguments to forward to it.

    Single use: built inline at the call site and consumed by exactly one
    ``>>``. Applying it a second time raises BundleReusedError. On the success
    path the captured arguments are never touched.
    """

    __slots__ = ("handler", "args", "_registry", "_consumed")

    def __init__(
        self,
        handler: H,
        args: tuple[Any, ...] = (),
        registry: TraitsRegistry | None = None,
    ):
        self.handler = handler
        self.args = args
        self._registry = registry or traits_registry
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def apply(self, value: Any) -> Any:
        """Classify ``value``; return its payload or route it to the handler."""
        if self._consumed:
            raise BundleReusedError(
                "FailureContext already consumed; build a new one per result value"
            )
        self._consumed = True

        traits = self._registry.lookup(value)
        if traits.is_failure(value):
            self._trigger_failure(traits, value)
        elif traits.carries_payload:
            return traits.take_payload(value)
        return None

    def _trigger_failure(self, traits: ErrorTraits, value: Any) -> None:
        handler, args = self.handler, self.args
        self.handler = self.args = None  # type: ignore[assignment]

        description = traits.describe_failure(value)
        if get_settings().log_failures:
            logger.warning(
                "failure_triggered",
                shape=type(value).__qualname__,
                handler=_handler_name(handler),
                description=description,
                extra_args=len(args),
            )

        handler(description, *args)

        if traits.carries_payload:
            raise HandlerReturnedError(handler, type(value), description)

    def __rrshift__(self, value: Any) -> Any:
        return self.apply(value)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "pending"
        return f"FailureContext({_handler_name(self.handler)}, args={len(self.args or ())}, {state})"


def _handler_name(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__qualname__


def handle_failure(handler: H, *args: Any, registry: TraitsRegistry | None = None) -> FailureContext[H]:
    """
    Bind ``handler`` and ``args`` for use as ``result >> handle_failure(handler, *args)``.

    On failure the handler receives the shape's failure description followed
    by ``args`` in order. ``registry`` overrides the global traits registry.
    """
    return FailureContext(handler, args, registry)


def chain(value: Any, context: FailureContext) -> Any:
    """Function form of ``value >> context``."""
    return context.apply(value)


__all__ = [
    "FailureHandler",
    "FailureContext",
    "handle_failure",
    "chain",
]
