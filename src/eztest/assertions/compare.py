"""Type-dispatched equality and ordering assertions."""

from __future__ import annotations

from typing import Any

from eztest.assertions._base import check, unsupported
from eztest.assertions.dispatch import (
    DEFAULT_EPSILON,
    ComparisonKind,
    IncompatibleOperand,
    coerce,
    format_value,
    select_kind,
    three_way,
)
from eztest.assertions.relations import (
    EQUAL,
    GREATER,
    GREATER_EQUAL,
    LESS,
    LESS_EQUAL,
    NOT_EQUAL,
    Relation,
    assertion_name,
)


def _compare(relation: Relation, first: Any, second: Any) -> bool:
    name = assertion_name(relation)
    kind = select_kind(first, second)
    if kind is ComparisonKind.UNSUPPORTED:
        return unsupported(name, first if first is not None else second)

    try:
        a = coerce(first, kind)
        b = coerce(second, kind)
    except IncompatibleOperand as exc:
        return unsupported(name, exc.value)

    if kind is ComparisonKind.FLOATING:
        passed = relation.holds_within(a, b, DEFAULT_EPSILON)
    else:
        passed = relation.holds(three_way(a, b))

    return check(name, passed, lambda: relation.describe(format_value(a, kind), format_value(b, kind)))


def _compare_precision(relation: Relation, first: Any, second: Any, epsilon: float) -> bool:
    name = assertion_name(relation, "precision")
    try:
        a = coerce(first, ComparisonKind.FLOATING)
        b = coerce(second, ComparisonKind.FLOATING)
    except IncompatibleOperand as exc:
        return unsupported(name, exc.value)

    return check(
        name,
        relation.holds_within(a, b, epsilon),
        lambda: f"{relation.describe(repr(a), repr(b))[:-1]} (epsilon {epsilon!r}).",
    )


def assert_are_equal(expected: Any, actual: Any) -> bool:
    """Assert that ``actual`` equals ``expected`` under the kind of ``expected``.

    Floating point values are equal when ``|expected - actual|`` is at most
    the machine epsilon. That tolerance is absolute and very small; prefer
    :func:`assert_are_equal_precision` for computed values.
    """
    return _compare(EQUAL, expected, actual)


def assert_are_not_equal(unexpected: Any, actual: Any) -> bool:
    """Assert that ``actual`` differs from ``unexpected``."""
    return _compare(NOT_EQUAL, unexpected, actual)


def assert_greater(value: Any, other: Any) -> bool:
    """Assert that ``value`` is greater than ``other``."""
    return _compare(GREATER, value, other)


def assert_greater_equal(value: Any, other: Any) -> bool:
    """Assert that ``value`` is greater than or equal to ``other``."""
    return _compare(GREATER_EQUAL, value, other)


def assert_less(value: Any, other: Any) -> bool:
    """Assert that ``value`` is less than ``other``."""
    return _compare(LESS, value, other)


def assert_less_equal(value: Any, other: Any) -> bool:
    """Assert that ``value`` is less than or equal to ``other``."""
    return _compare(LESS_EQUAL, value, other)


def assert_are_equal_precision(expected: Any, actual: Any, epsilon: float) -> bool:
    """Assert that two real numbers differ by at most ``epsilon``."""
    return _compare_precision(EQUAL, expected, actual, epsilon)


def assert_are_not_equal_precision(unexpected: Any, actual: Any, epsilon: float) -> bool:
    return _compare_precision(NOT_EQUAL, unexpected, actual, epsilon)


def assert_greater_precision(value: Any, other: Any, epsilon: float) -> bool:
    return _compare_precision(GREATER, value, other, epsilon)


def assert_greater_equal_precision(value: Any, other: Any, epsilon: float) -> bool:
    return _compare_precision(GREATER_EQUAL, value, other, epsilon)


def assert_less_precision(value: Any, other: Any, epsilon: float) -> bool:
    return _compare_precision(LESS, value, other, epsilon)


def assert_less_equal_precision(value: Any, other: Any, epsilon: float) -> bool:
    return _compare_precision(LESS_EQUAL, value, other, epsilon)
