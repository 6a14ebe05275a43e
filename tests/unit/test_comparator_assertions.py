from eztest.assertions import (
    assert_are_equal_cmp,
    assert_are_not_equal_cmp,
    assert_greater_cmp,
    assert_greater_equal_cmp,
    assert_less_cmp,
    assert_less_equal_cmp,
)
from eztest.types import Outcome


def by_length(a: str, b: str) -> int:
    return len(a) - len(b)


def test_comparator_relations(result_state):
    assert assert_are_equal_cmp("abc", "xyz", by_length)
    assert assert_are_not_equal_cmp("a", "xyz", by_length)
    assert assert_greater_cmp("abcd", "x", by_length)
    assert assert_greater_equal_cmp("ab", "xy", by_length)
    assert assert_less_cmp("a", "xy", by_length)
    assert assert_less_equal_cmp("a", "x", by_length)
    assert result_state.outcome is Outcome.UNDEFINED


def test_comparator_failures(result_state, recording_reporter):
    assert not assert_are_equal_cmp("a", "xy", by_length)
    assert not assert_greater_cmp("a", "x", by_length)

    assert result_state.outcome is Outcome.FAILED
    assert [f.message for f in recording_reporter.failures] == [
        "Assert are equal cmp failed: expected 'a', but got 'xy' (comparator returned -1).",
        "Assert greater cmp failed: 'a' is not greater than 'x' (comparator returned 0).",
    ]
