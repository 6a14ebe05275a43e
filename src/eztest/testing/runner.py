"""Sequential test runner."""

from __future__ import annotations

import logging
import time
import traceback
from collections.abc import Sequence
from typing import TextIO

from eztest.assertions._base import record_failure
from eztest.assertions.result import SourceLocation
from eztest.config import RunConfig
from eztest.context import ResultState, TestResult, result_state_scope
from eztest.errors import ConfigurationError
from eztest.reports.base import Reporter
from eztest.reports.console import ConsoleReporter
from eztest.testing.discovery import discover
from eztest.testing.registry import BASE_DESCRIPTOR, TestDescriptor, TestFn
from eztest.types import Outcome

logger = logging.getLogger(__name__)


def _exception_location(exc: BaseException) -> SourceLocation | None:
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return None
    last = frames[-1]
    return SourceLocation(file=last.filename, line=last.lineno or 0)


def _call_phase(phase: str, fn: TestFn, descriptor: TestDescriptor) -> bool:
    """Run one phase of a test, recording an escaping exception as a failure.

    Returns whether the phase completed without raising.
    """
    try:
        fn()
    except Exception as e:
        logger.debug("%s of %s raised %r", phase, descriptor.full_name, e)
        detail = f": {e}" if str(e) else ""
        record_failure(f"Unhandled {type(e).__name__} in {phase}{detail}", _exception_location(e))
        return False
    return True


class Runner:
    """Runs registered tests one after another in registry order.

    Args:
        reporter: Receives progress. Defaults to a :class:`ConsoleReporter`
            built from the run configuration.
        file: Stream for the default reporter. Defaults to stdout.
    """

    def __init__(self, *, reporter: Reporter | None = None, file: TextIO | None = None) -> None:
        self.reporter = reporter
        self.file = file
        self.state: ResultState | None = None

    def run(
        self,
        config: RunConfig | None,
        tests: Sequence[TestDescriptor] | None = None,
    ) -> int:
        """Run every discovered test and return the number of failed tests.

        Args:
            config: Options for this run. Required.
            tests: Registry entries to walk instead of the global registry.

        Raises:
            ConfigurationError: If ``config`` is missing.
        """
        if config is None:
            msg = "Runner.run() requires a RunConfig"
            raise ConfigurationError(msg)

        reporter = self.reporter or ConsoleReporter.from_config(config, file=self.file)
        state = ResultState(config=config, reporter=reporter, current=BASE_DESCRIPTOR)
        self.state = state

        with result_state_scope(state):
            working_list = discover(tests)
            reporter.on_discovery_complete(len(working_list))

            skip_suites = config.skip_suites
            for descriptor in working_list:
                if descriptor.suite in skip_suites:
                    state.begin(descriptor, Outcome.SKIPPED)
                    elapsed_ms = 0
                else:
                    state.begin(descriptor)
                    elapsed_ms = self.execute(descriptor)

                result = state.register_result(elapsed_ms)
                logger.debug("%s %s in %dms", descriptor.full_name, result.outcome.value, elapsed_ms)
                reporter.on_test_complete(result)
                state.end()

            reporter.on_run_complete(state.summary())

        return state.failed

    def execute(self, descriptor: TestDescriptor) -> int:
        """Run setup, body and teardown; return elapsed milliseconds."""
        start = time.perf_counter()

        if descriptor.setup is None or _call_phase("setup", descriptor.setup, descriptor):
            _call_phase("run", descriptor.run, descriptor)
            if descriptor.teardown is not None:
                _call_phase("teardown", descriptor.teardown, descriptor)

        return int((time.perf_counter() - start) * 1000)

    @property
    def results(self) -> list[TestResult]:
        return self.state.results if self.state else []


def run(config: RunConfig | None, *, reporter: Reporter | None = None) -> int:
    """Run the global registry and return the number of failed tests."""
    return Runner(reporter=reporter).run(config)


__all__ = ["Runner", "run"]
