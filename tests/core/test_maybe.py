"""Tests for handle_failure.core.maybe."""

import pytest

from handle_failure.core.errors import ContractViolationError
from handle_failure.core.maybe import Maybe


class TestMaybe:
    def test_some(self):
        m = Maybe.some(3)
        assert m.has_value()
        assert m.value == 3
        assert bool(m) is True

    def test_empty(self):
        m = Maybe.empty()
        assert not m.has_value()
        assert bool(m) is False

    def test_none_is_a_value(self):
        assert Maybe.some(None).has_value()

    def test_from_nullable(self):
        assert not Maybe.from_nullable(None)
        assert Maybe.from_nullable(0).value == 0

    def test_value_on_empty_raises(self):
        with pytest.raises(ContractViolationError):
            Maybe.empty().value

    def test_equality_and_hash(self):
        assert Maybe.some(1) == Maybe.some(1)
        assert Maybe.empty() == Maybe.empty()
        assert Maybe.some(1) != Maybe.empty()
        assert len({Maybe.some(1), Maybe.some(1), Maybe.empty()}) == 2

    def test_repr(self):
        assert repr(Maybe.some("a")) == "Maybe.some('a')"
        assert repr(Maybe.empty()) == "Maybe.empty()"
