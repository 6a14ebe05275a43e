"""EzTest - unit-test harness with type-dispatched assertions."""

from .testing import Runner, run, setup, teardown, test, test_full
from .assertions import (
    assert_are_equal,
    assert_are_equal_cmp,
    assert_are_equal_mem,
    assert_are_equal_precision,
    assert_are_not_equal,
    assert_are_not_equal_cmp,
    assert_are_not_equal_mem,
    assert_are_not_equal_precision,
    assert_are_not_same,
    assert_are_same,
    assert_greater,
    assert_greater_cmp,
    assert_greater_equal,
    assert_greater_equal_cmp,
    assert_greater_equal_mem,
    assert_greater_equal_precision,
    assert_greater_mem,
    assert_greater_precision,
    assert_is_false,
    assert_is_nan,
    assert_is_not_null,
    assert_is_null,
    assert_is_true,
    assert_less,
    assert_less_cmp,
    assert_less_equal,
    assert_less_equal_cmp,
    assert_less_equal_mem,
    assert_less_equal_precision,
    assert_less_mem,
    assert_less_precision,
)
from .cli import main
from .config import RunConfig
from .errors import ConfigurationError, EzTestError, NoActiveTestError, RegistrationError
from .types import Outcome
from .version import __version__


__all__ = [
    # Registration
    "test",
    "test_full",
    "setup",
    "teardown",
    # Running
    "Runner",
    "RunConfig",
    "run",
    "main",
    "Outcome",
    # Errors
    "EzTestError",
    "ConfigurationError",
    "NoActiveTestError",
    "RegistrationError",
    # Assertions
    "assert_is_null",
    "assert_is_not_null",
    "assert_is_true",
    "assert_is_false",
    "assert_are_same",
    "assert_are_not_same",
    "assert_is_nan",
    "assert_are_equal",
    "assert_are_not_equal",
    "assert_greater",
    "assert_greater_equal",
    "assert_less",
    "assert_less_equal",
    "assert_are_equal_precision",
    "assert_are_not_equal_precision",
    "assert_greater_precision",
    "assert_greater_equal_precision",
    "assert_less_precision",
    "assert_less_equal_precision",
    "assert_are_equal_mem",
    "assert_are_not_equal_mem",
    "assert_greater_mem",
    "assert_greater_equal_mem",
    "assert_less_mem",
    "assert_less_equal_mem",
    "assert_are_equal_cmp",
    "assert_are_not_equal_cmp",
    "assert_greater_cmp",
    "assert_greater_equal_cmp",
    "assert_less_cmp",
    "assert_less_equal_cmp",
]
