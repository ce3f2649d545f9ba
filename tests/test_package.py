"""Tests for the top-level handle_failure package."""

import importlib

import pytest

import handle_failure
from handle_failure import ErrorCode, Maybe, UnwrapError, handle_failure as bind, unwrap


class TestPackageImport:
    def test_import_exposes_version(self):
        module = importlib.import_module("handle_failure")
        assert module is handle_failure
        assert module.__version__ == "0.3.0"

    def test_chain_with_failure_logging_unset(self, monkeypatch):
        monkeypatch.delenv("HF_LOG_FAILURES", raising=False)
        assert Maybe.some(3) >> unwrap() == 3
        assert (7, ErrorCode.ok()) >> unwrap() == 7

    def test_failure_with_failure_logging_unset(self, monkeypatch):
        monkeypatch.delenv("HF_LOG_FAILURES", raising=False)
        with pytest.raises(UnwrapError):
            Maybe.empty() >> unwrap()

    def test_handler_binding_is_exported(self):
        def fail(info):
            raise LookupError(info)

        with pytest.raises(LookupError):
            Maybe.empty() >> bind(fail)
