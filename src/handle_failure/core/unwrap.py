"""
The unwrap handler: escalate any failure to an UnwrapError.

Context for the diagnostic is produced lazily, so a call site can describe
itself in as much detail as it likes without paying for it on success.

Usage:
    # explicit context producer, receives a ``record`` callback
    data = read(path) >> unwrap(lambda record: record("While reading ", path))

    # shorthand: the lambda runs only if read() failed
    data = read(path) >> unwrap_lazy(lambda: ("While reading ", path))

    # already-built fragments, formatted only if read() failed
    data = read(path) >> unwrap_with("While reading ", path)

Message format (byte-exact):
    ``Error message : <description>. `` followed, for each ``record`` call
    with at least one fragment, by ``Context info : <fragments>.``.
    Fragments are passed through str() and concatenated without separators.
"""

from __future__ import annotations

from typing import Any, Callable, NoReturn

from handle_failure.core.bundle import FailureContext, handle_failure
from handle_failure.core.errors import UnwrapError

Recorder = Callable[..., None]
ContextProducer = Callable[[Recorder], None]


def _no_context(record: Recorder) -> None:
    pass


def format_unwrap_message(description: Any, producer: ContextProducer) -> tuple[str, tuple[Any, ...]]:
    """Build the diagnostic message; returns it with every fragment recorded."""
    parts = ["Error message : ", str(description), ". "]
    recorded: list[Any] = []

    def record(*fragments: Any) -> None:
        if fragments:
            parts.append("Context info : ")
            parts.extend(str(f) for f in fragments)
            parts.append(".")
            recorded.extend(fragments)

    producer(record)
    return "".join(parts), tuple(recorded)


def unwrap_formatter(description: Any, producer: ContextProducer) -> NoReturn:
    """Failure handler behind unwrap(): format the diagnostic and raise it."""
    message, fragments = format_unwrap_message(description, producer)
    raise UnwrapError(message, description=str(description), fragments=fragments)


def unwrap(producer: ContextProducer | None = None) -> FailureContext:
    """Raise UnwrapError on failure, with context from ``producer(record)``."""
    return handle_failure(unwrap_formatter, producer or _no_context)


def unwrap_lazy(thunk: Callable[[], Any]) -> FailureContext:
    """
    Shorthand for an inline context expression.

    ``thunk`` is evaluated only on failure. It may return a tuple of fragments
    or a single fragment.
    """

    def producer(record: Recorder) -> None:
        fragments = thunk()
        if isinstance(fragments, tuple):
            record(*fragments)
        else:
            record(fragments)

    return unwrap(producer)


def unwrap_with(*fragments: Any) -> FailureContext:
    """Context from fragments the caller already has; only formatted on failure."""
    return unwrap(lambda record: record(*fragments))


__all__ = [
    "ContextProducer",
    "Recorder",
    "format_unwrap_message",
    "unwrap_formatter",
    "unwrap",
    "unwrap_lazy",
    "unwrap_with",
]
