"""Assertions driven by a caller-supplied three-way comparator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from eztest.assertions._base import check
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

T = TypeVar("T")
Comparator = Callable[[T, T], int]


def _compare_cmp(relation: Relation, first: Any, second: Any, cmp: Comparator[Any]) -> bool:
    result = cmp(first, second)
    return check(
        assertion_name(relation, "cmp"),
        relation.holds(result),
        lambda: f"{relation.describe(repr(first), repr(second))[:-1]} (comparator returned {result}).",
    )


def assert_are_equal_cmp(expected: T, actual: T, cmp: Comparator[T]) -> bool:
    """Assert that ``cmp(expected, actual) == 0``."""
    return _compare_cmp(EQUAL, expected, actual, cmp)


def assert_are_not_equal_cmp(unexpected: T, actual: T, cmp: Comparator[T]) -> bool:
    return _compare_cmp(NOT_EQUAL, unexpected, actual, cmp)


def assert_greater_cmp(value: T, other: T, cmp: Comparator[T]) -> bool:
    """Assert that ``cmp(value, other) > 0``."""
    return _compare_cmp(GREATER, value, other, cmp)


def assert_greater_equal_cmp(value: T, other: T, cmp: Comparator[T]) -> bool:
    return _compare_cmp(GREATER_EQUAL, value, other, cmp)


def assert_less_cmp(value: T, other: T, cmp: Comparator[T]) -> bool:
    return _compare_cmp(LESS, value, other, cmp)


def assert_less_equal_cmp(value: T, other: T, cmp: Comparator[T]) -> bool:
    return _compare_cmp(LESS_EQUAL, value, other, cmp)
