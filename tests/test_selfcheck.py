"""Tests for handle_failure.selfcheck."""

from handle_failure.core.maybe import Maybe
from handle_failure.selfcheck import DEFAULT_SCENARIOS, Scenario, run_selfcheck


class TestSelfcheck:
    def test_default_scenarios_pass(self):
        outcomes = run_selfcheck()
        assert len(outcomes) == len(DEFAULT_SCENARIOS)
        assert all(o.passed for o in outcomes)

    def test_cases_numbered_from_one(self):
        outcomes = run_selfcheck()
        assert [o.case for o in outcomes] == list(range(1, len(outcomes) + 1))

    def test_failure_message_names_case(self):
        outcomes = run_selfcheck()
        empty = outcomes[1]
        assert empty.name == "empty maybe"
        assert empty.message == (
            "Error message : Tried to unwrap empty optional. Context info : Failure in case 2."
        )

    def test_success_has_no_message(self):
        assert run_selfcheck()[0].message is None

    def test_mismatch_is_reported(self):
        outcomes = run_selfcheck((Scenario("wrongly expected", Maybe.empty, False),))
        assert outcomes[0].raised is True
        assert outcomes[0].passed is False
        assert outcomes[0].to_dict()["passed"] is False
