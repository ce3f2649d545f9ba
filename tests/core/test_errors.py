"""Tests for handle_failure.core.errors."""

from handle_failure.core.errors import (
    BundleReusedError,
    ContractViolationError,
    ErrorKind,
    HandleFailureError,
    HandlerReturnedError,
    UnregisteredShapeError,
    UnwrapError,
)


class TestHandleFailureError:
    def test_str_is_message(self):
        error = HandleFailureError("exact text. ")
        assert str(error) == "exact text. "
        assert error.message == "exact text. "

    def test_default_kind(self):
        assert HandleFailureError("x").kind == ErrorKind.CONTRACT
        assert UnwrapError("x").kind == ErrorKind.UNWRAP
        assert UnregisteredShapeError(1).kind == ErrorKind.REGISTRATION

    def test_with_context(self):
        error = ContractViolationError("bad").with_context(shape="tuple", arity=5)
        assert error.context == {"shape": "tuple", "arity": 5}

    def test_cause_is_chained(self):
        cause = OSError("disk")
        error = HandleFailureError("wrapped", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "disk"

    def test_to_dict(self):
        d = ContractViolationError("bad", context={"k": 1}).to_dict()
        assert d == {
            "error_type": "ContractViolationError",
            "message": "bad",
            "kind": "CONTRACT",
            "context": {"k": 1},
        }

    def test_repr(self):
        assert repr(UnwrapError("m")) == "UnwrapError('m', kind=UNWRAP)"


class TestSubclasses:
    def test_hierarchy(self):
        assert issubclass(HandlerReturnedError, ContractViolationError)
        assert issubclass(BundleReusedError, ContractViolationError)
        assert issubclass(UnwrapError, RuntimeError)
        assert issubclass(UnregisteredShapeError, TypeError)

    def test_handler_returned_error_names_handler(self):
        def my_handler(info):
            return None

        error = HandlerReturnedError(my_handler, tuple, "desc")
        assert "my_handler" in str(error)
        assert error.context["shape"] == "tuple"
        assert error.context["description"] == "desc"

    def test_unregistered_shape_message(self):
        assert str(UnregisteredShapeError(3)) == "No error traits registered for shape 'int'"
        assert str(UnregisteredShapeError((1,))).endswith("of arity 1")
