"""Tests for handle_failure.core.unwrap: message format and lazy context."""

import pytest

from handle_failure.core.adapters import StatusPair, describe_status
from handle_failure.core.errors import HandleFailureError, UnwrapError
from handle_failure.core.maybe import Maybe
from handle_failure.core.status import ErrorCode, system_category
from handle_failure.core.unwrap import (
    format_unwrap_message,
    unwrap,
    unwrap_formatter,
    unwrap_lazy,
    unwrap_with,
)

FAIL = ErrorCode(1, system_category())


class TestMessageFormat:
    """Byte-exact diagnostic messages."""

    def test_no_context(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap()
        assert str(exc_info.value) == "Error message : Tried to unwrap empty optional. "

    def test_single_fragment(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap_lazy(lambda: ("case 1",))
        assert str(exc_info.value) == (
            "Error message : Tried to unwrap empty optional. Context info : case 1."
        )

    def test_fragments_concatenated_without_separator(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap_lazy(lambda: ("Failure in case ", 3, "!", 4.5))
        assert str(exc_info.value).endswith("Context info : Failure in case 3!4.5.")

    def test_producer_recording_nothing_adds_no_section(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap(lambda record: record())
        assert str(exc_info.value) == "Error message : Tried to unwrap empty optional. "
        assert "Context info" not in str(exc_info.value)

    def test_each_record_call_adds_a_section(self):
        def producer(record):
            record("a", "b")
            record("c")

        message, fragments = format_unwrap_message("d", producer)
        assert message == "Error message : d. Context info : ab.Context info : c."
        assert fragments == ("a", "b", "c")

    def test_status_description_in_message(self):
        with pytest.raises(UnwrapError) as exc_info:
            StatusPair(0, FAIL) >> unwrap_with("while ", "testing")
        assert str(exc_info.value) == (
            f"Error message : {describe_status(FAIL)}. Context info : while testing."
        )

    def test_bare_status_code_raises_too(self):
        with pytest.raises(UnwrapError):
            FAIL >> unwrap()


class TestUnwrapError:
    """Attributes carried by UnwrapError."""

    def test_attributes(self):
        with pytest.raises(UnwrapError) as exc_info:
            (1, 2, FAIL) >> unwrap_with("ctx ", 7)
        error = exc_info.value
        assert error.description == describe_status(FAIL)
        assert error.fragments == ("ctx ", 7)
        assert isinstance(error, RuntimeError)
        assert isinstance(error, HandleFailureError)

    def test_to_dict(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap_with("x", 1)
        d = exc_info.value.to_dict()
        assert d["kind"] == "UNWRAP"
        assert d["fragments"] == ["x", "1"]
        assert d["description"] == "Tried to unwrap empty optional"

    def test_formatter_never_returns(self):
        with pytest.raises(UnwrapError):
            unwrap_formatter("info", lambda record: None)


class TestLaziness:
    """Context is only produced on failure."""

    def test_thunk_not_called_on_success(self):
        def thunk():
            pytest.fail("context evaluated on the success path")

        assert (Maybe.some("v") >> unwrap_lazy(thunk)) == "v"
        assert ((1, 2, 3, ErrorCode.ok()) >> unwrap_lazy(thunk)) == (1, 2, 3)

    def test_producer_not_called_on_success(self):
        calls = []
        assert ((7, ErrorCode.ok()) >> unwrap(calls.append)) == 7
        assert calls == []

    def test_fragments_not_stringified_on_success(self):
        class Loud:
            def __str__(self):
                raise AssertionError("formatted on the success path")

        assert (Maybe.some(1) >> unwrap_with(Loud())) == 1

    def test_thunk_called_once_on_failure(self):
        calls = []

        def thunk():
            calls.append(1)
            return "ctx"

        with pytest.raises(UnwrapError, match="Context info : ctx.$"):
            Maybe.empty() >> unwrap_lazy(thunk)
        assert calls == [1]

    def test_single_non_tuple_fragment(self):
        with pytest.raises(UnwrapError) as exc_info:
            Maybe.empty() >> unwrap_lazy(lambda: 42)
        assert str(exc_info.value).endswith("Context info : 42.")
