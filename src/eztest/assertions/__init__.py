"""Assertion library for EzTest tests.

Every assertion returns ``True`` when it passes. On failure it marks the
running test as failed, reports a diagnostic located at the call site and
returns ``False``; the test body keeps running.
"""

from .basic import (
    assert_are_not_same,
    assert_are_same,
    assert_is_false,
    assert_is_nan,
    assert_is_not_null,
    assert_is_null,
    assert_is_true,
)
from .comparator import (
    assert_are_equal_cmp,
    assert_are_not_equal_cmp,
    assert_greater_cmp,
    assert_greater_equal_cmp,
    assert_less_cmp,
    assert_less_equal_cmp,
)
from .compare import (
    assert_are_equal,
    assert_are_equal_precision,
    assert_are_not_equal,
    assert_are_not_equal_precision,
    assert_greater,
    assert_greater_equal,
    assert_greater_equal_precision,
    assert_greater_precision,
    assert_less,
    assert_less_equal,
    assert_less_equal_precision,
    assert_less_precision,
)
from .dispatch import DEFAULT_EPSILON, ComparisonKind, comparison_kind
from .memory import (
    assert_are_equal_mem,
    assert_are_not_equal_mem,
    assert_greater_equal_mem,
    assert_greater_mem,
    assert_less_equal_mem,
    assert_less_mem,
)
from .result import AssertionFailure, SourceLocation

__all__ = [
    "AssertionFailure",
    "SourceLocation",
    "ComparisonKind",
    "DEFAULT_EPSILON",
    "comparison_kind",
    # Primitive predicates
    "assert_is_null",
    "assert_is_not_null",
    "assert_is_true",
    "assert_is_false",
    "assert_are_same",
    "assert_are_not_same",
    "assert_is_nan",
    # Type-dispatched
    "assert_are_equal",
    "assert_are_not_equal",
    "assert_greater",
    "assert_greater_equal",
    "assert_less",
    "assert_less_equal",
    # Explicit epsilon
    "assert_are_equal_precision",
    "assert_are_not_equal_precision",
    "assert_greater_precision",
    "assert_greater_equal_precision",
    "assert_less_precision",
    "assert_less_equal_precision",
    # Memory blocks
    "assert_are_equal_mem",
    "assert_are_not_equal_mem",
    "assert_greater_mem",
    "assert_greater_equal_mem",
    "assert_less_mem",
    "assert_less_equal_mem",
    # Comparator
    "assert_are_equal_cmp",
    "assert_are_not_equal_cmp",
    "assert_greater_cmp",
    "assert_greater_equal_cmp",
    "assert_less_cmp",
    "assert_less_equal_cmp",
]
