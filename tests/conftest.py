"""
Shared pytest fixtures for handle-failure tests.

- Settings are re-read from a clean ``HF_`` environment for every test
- ``recording_handler`` captures handler calls and then raises, as handlers must
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from handle_failure.core.settings import reset_settings
from handle_failure.core.traits import TraitsRegistry


class HandlerCalled(Exception):
    """Raised by RecordingHandler so the combinator never falls through."""


class RecordingHandler:
    """Failure handler that records each call, then raises HandlerCalled."""

    raises = HandlerCalled

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, description: Any, *args: Any):
        self.calls.append((description, *args))
        raise HandlerCalled(description)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Strip HF_ variables and drop cached settings around each test."""
    for key in list(os.environ):
        if key.startswith("HF_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def empty_registry() -> TraitsRegistry:
    return TraitsRegistry()
