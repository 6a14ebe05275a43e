"""Value-level assertions that do not depend on type dispatch."""

import math
import numbers
from typing import Any

from eztest.assertions._base import check, unsupported
from eztest.assertions.dispatch import unwrap


def _describe(value: Any) -> str:
    return repr(value)


def assert_is_null(value: Any) -> bool:
    """Assert that ``value`` is ``None`` (or a null ctypes pointer)."""
    return check(
        "Assert is null",
        unwrap(value) is None,
        lambda: f"expected None, but got {_describe(value)}.",
    )


def assert_is_not_null(value: Any) -> bool:
    return check("Assert is not null", unwrap(value) is not None, lambda: "value is None.")


def assert_is_true(condition: Any) -> bool:
    return check(
        "Assert is true",
        bool(condition),
        lambda: f"expected a true value, but got {_describe(condition)}.",
    )


def assert_is_false(condition: Any) -> bool:
    return check(
        "Assert is false",
        not condition,
        lambda: f"expected a false value, but got {_describe(condition)}.",
    )


def assert_are_same(expected: Any, actual: Any) -> bool:
    """Assert that both operands are the same object."""
    return check(
        "Assert are same",
        expected is actual,
        lambda: f"{_describe(expected)} and {_describe(actual)} are different objects.",
    )


def assert_are_not_same(unexpected: Any, actual: Any) -> bool:
    return check(
        "Assert are not same",
        unexpected is not actual,
        lambda: f"both operands are the same object {_describe(actual)}.",
    )


def assert_is_nan(value: Any) -> bool:
    raw = unwrap(value)
    if not isinstance(raw, numbers.Real):
        return unsupported("Assert is nan", value)
    return check("Assert is nan", math.isnan(raw), lambda: f"{raw!r} is not NaN.")
