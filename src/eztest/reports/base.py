"""Base reporter protocol for EzTest output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from eztest.assertions.result import AssertionFailure
    from eztest.context import RunSummary, TestResult


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    Methods are called synchronously from the runner in execution order.
    """

    def on_discovery_complete(self, count: int) -> None:
        """Called once the working list of tests is known."""
        ...

    def on_assertion_failed(self, failure: AssertionFailure) -> None:
        """Called for every failing assertion, while the test is running."""
        ...

    def on_test_complete(self, result: TestResult) -> None:
        """Called after each test has run or been skipped."""
        ...

    def on_run_complete(self, summary: RunSummary) -> None:
        """Called after all tests complete."""
        ...
