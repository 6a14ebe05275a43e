"""Shared fixtures for unit tests."""

import pytest

from eztest.config import RunConfig
from eztest.context import ResultState, result_state_scope
from eztest.testing.registry import TestDescriptor, clear_registry


class NullReporter:
    """Silent reporter for testing."""

    def on_discovery_complete(self, count: int) -> None:
        pass

    def on_assertion_failed(self, failure) -> None:
        pass

    def on_test_complete(self, result) -> None:
        pass

    def on_run_complete(self, summary) -> None:
        pass


class RecordingReporter(NullReporter):
    """Reporter that keeps every event for inspection."""

    def __init__(self) -> None:
        self.discovered: int | None = None
        self.failures = []
        self.results = []
        self.summary = None

    def on_discovery_complete(self, count: int) -> None:
        self.discovered = count

    def on_assertion_failed(self, failure) -> None:
        self.failures.append(failure)

    def on_test_complete(self, result) -> None:
        self.results.append(result)

    def on_run_complete(self, summary) -> None:
        self.summary = summary


@pytest.fixture(autouse=True)
def clean_registry():
    """Clear the test registry before and after each test."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def result_state(recording_reporter):
    """Activate a result state as if ``sample::case`` were running."""
    descriptor = TestDescriptor(suite="sample", name="case", run=lambda: None)
    state = ResultState(config=RunConfig(), reporter=recording_reporter)
    state.begin(descriptor)
    with result_state_scope(state):
        yield state
