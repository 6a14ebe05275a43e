"""Failure recording shared by every assertion family."""

import inspect
import logging
from collections.abc import Callable
from types import FrameType

from eztest.assertions.result import AssertionFailure, SourceLocation
from eztest.context import get_result_state

logger = logging.getLogger(__name__)

_PACKAGE = "eztest.assertions"


def caller_location(frame: FrameType | None = None) -> SourceLocation:
    """Return the first stack location outside the assertions package."""
    frame = frame or inspect.currentframe()

    while frame:
        module_name = frame.f_globals.get("__name__", "")
        if module_name != _PACKAGE and not module_name.startswith(_PACKAGE + "."):
            return SourceLocation(file=frame.f_code.co_filename, line=frame.f_lineno)
        frame = frame.f_back

    logger.warning("No caller frame found for assertion")
    return SourceLocation(file="<unknown>", line=0)


def record_failure(message: str, location: SourceLocation | None = None) -> None:
    """Fail the running test with ``message`` located at the call site."""
    state = get_result_state()
    failure = AssertionFailure(
        suite=state.current.suite,
        test=state.current.name,
        message=message,
        location=location or caller_location(),
    )
    state.add_failure(failure)


def check(name: str, passed: bool, message: Callable[[], str]) -> bool:
    """Record a failure for assertion ``name`` unless ``passed``.

    ``message`` is only rendered when the check fails.
    """
    get_result_state(name)
    if passed:
        return True
    record_failure(f"{name} failed: {message()}")
    return False


def unsupported(name: str, value: object) -> bool:
    """Fail assertion ``name`` because ``value`` has no comparison."""
    return check(name, False, lambda: f"unsupported data type '{type(value).__name__}'.")
