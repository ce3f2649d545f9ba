"""Self-check: run every built-in shape through the unwrap pipeline.

Each scenario produces a result value, applies
``unwrap_lazy(lambda: ("Failure in case ", n))`` and records whether an
UnwrapError was raised. A scenario passes when that matches its expectation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from handle_failure.core.adapters import StatusPair
from handle_failure.core.errors import UnwrapError
from handle_failure.core.maybe import Maybe
from handle_failure.core.result import Err, Ok
from handle_failure.core.status import ErrorCode, system_category
from handle_failure.core.unwrap import unwrap_lazy

FAIL_CODE = ErrorCode(1, system_category())
OK_CODE = ErrorCode.ok()


@dataclass(frozen=True)
class Scenario:
    name: str
    produce: Callable[[], Any]
    expect_failure: bool


@dataclass(frozen=True)
class ScenarioOutcome:
    case: int
    name: str
    expect_failure: bool
    raised: bool
    message: str | None = None

    @property
    def passed(self) -> bool:
        return self.raised == self.expect_failure

    def to_dict(self) -> dict[str, Any]:
        return {
            "case": self.case,
            "name": self.name,
            "expect_failure": self.expect_failure,
            "raised": self.raised,
            "passed": self.passed,
            "message": self.message,
        }


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario("maybe holding 1", lambda: Maybe.some(1), False),
    Scenario("empty maybe", Maybe.empty, True),
    Scenario("pair ok", lambda: StatusPair(0, OK_CODE), False),
    Scenario("pair failing", lambda: StatusPair(0, FAIL_CODE), True),
    Scenario("2-tuple ok", lambda: (0, OK_CODE), False),
    Scenario("2-tuple failing", lambda: (0, FAIL_CODE), True),
    Scenario("3-tuple ok", lambda: (0, 0, OK_CODE), False),
    Scenario("3-tuple failing", lambda: (0, 0, FAIL_CODE), True),
    Scenario("4-tuple ok", lambda: (0, 0, 0, OK_CODE), False),
    Scenario("4-tuple failing", lambda: (0, 0, 0, FAIL_CODE), True),
    Scenario("status ok", lambda: OK_CODE, False),
    Scenario("status failing", lambda: FAIL_CODE, True),
    Scenario("ok result", lambda: Ok(0), False),
    Scenario("err result", lambda: Err(ValueError("bad input")), True),
)


def run_selfcheck(scenarios: tuple[Scenario, ...] = DEFAULT_SCENARIOS) -> list[ScenarioOutcome]:
    """Run ``scenarios`` in order; cases are numbered from 1."""
    outcomes = []
    for case, scenario in enumerate(scenarios, start=1):
        try:
            scenario.produce() >> unwrap_lazy(lambda: ("Failure in case ", case))
        except UnwrapError as e:
            outcomes.append(ScenarioOutcome(case, scenario.name, scenario.expect_failure, True, str(e)))
        else:
            outcomes.append(ScenarioOutcome(case, scenario.name, scenario.expect_failure, False))
    return outcomes


__all__ = [
    "Scenario",
    "ScenarioOutcome",
    "DEFAULT_SCENARIOS",
    "run_selfcheck",
]
