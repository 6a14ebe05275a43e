from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from eztest.errors import NoActiveTestError
from eztest.testing.registry import BASE_DESCRIPTOR, TestDescriptor
from eztest.types import Outcome

if TYPE_CHECKING:
    from eztest.assertions.result import AssertionFailure
    from eztest.config import RunConfig
    from eztest.reports.base import Reporter


@dataclass
class TestResult:
    """Final outcome of one registered test."""

    __test__ = False

    descriptor: TestDescriptor
    outcome: Outcome
    elapsed_ms: int = 0
    failures: list[AssertionFailure] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Aggregate counters for a finished run."""

    passed: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.skipped + self.failed


@dataclass
class ResultState:
    """Mutable state of a run, shared by the runner and the assertions.

    Attributes
    ----------
    config
        Options of the active run.
    reporter
        Receives assertion diagnostics as they happen.
    current
        Descriptor being executed; the base descriptor between tests.
    outcome
        Tentative outcome of ``current``.
    failures
        Assertion failures recorded for ``current``.
    results
        Completed tests, in execution order.
    """

    config: RunConfig
    reporter: Reporter
    current: TestDescriptor = BASE_DESCRIPTOR
    outcome: Outcome = Outcome.UNDEFINED
    passed: int = 0
    skipped: int = 0
    failed: int = 0
    failures: list[AssertionFailure] = field(default_factory=list)
    results: list[TestResult] = field(default_factory=list)

    def begin(self, descriptor: TestDescriptor, outcome: Outcome = Outcome.UNDEFINED) -> None:
        """Make ``descriptor`` the current test with a fresh outcome."""
        self.current = descriptor
        self.outcome = outcome
        self.failures = []

    def add_failure(self, failure: AssertionFailure) -> None:
        """Fail the current test and forward the diagnostic to the reporter."""
        self.outcome = Outcome.FAILED
        self.failures.append(failure)
        self.reporter.on_assertion_failed(failure)

    def register_result(self, elapsed_ms: int) -> TestResult:
        """Fold the current outcome into the counters."""
        if self.outcome == Outcome.FAILED:
            self.failed += 1
        elif self.outcome == Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.outcome = Outcome.PASSED
            self.passed += 1

        result = TestResult(
            descriptor=self.current,
            outcome=self.outcome,
            elapsed_ms=elapsed_ms,
            failures=list(self.failures),
        )
        self.results.append(result)
        return result

    def end(self) -> None:
        self.current = BASE_DESCRIPTOR
        self.failures = []

    def summary(self) -> RunSummary:
        return RunSummary(passed=self.passed, skipped=self.skipped, failed=self.failed)


RESULT_STATE: ContextVar[ResultState | None] = ContextVar("result_state", default=None)


@contextmanager
def result_state_scope(state: ResultState) -> Iterator[ResultState]:
    token = RESULT_STATE.set(state)
    try:
        yield state
    finally:
        RESULT_STATE.reset(token)


def get_result_state(assertion_name: str | None = None) -> ResultState:
    """Return the active state, raising if no test is running."""
    state = RESULT_STATE.get()
    if state is None:
        raise NoActiveTestError(assertion_name)
    return state
