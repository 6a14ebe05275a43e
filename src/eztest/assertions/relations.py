"""Relations shared by the value, memory and comparator assertion families."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Relation:
    """One of the six comparison relations.

    ``holds`` interprets a three-way comparison result. ``holds_within``
    applies the floating point rule with a tolerance.
    """

    label: str
    holds: Callable[[int], bool]
    holds_within: Callable[[float, float, float], bool]
    describe: Callable[[str, str], str]


def _equal_within(a: float, b: float, epsilon: float) -> bool:
    # inf - inf is nan, so identical infinities need the direct check.
    return a == b or abs(a - b) <= epsilon


EQUAL = Relation(
    label="are equal",
    holds=lambda c: c == 0,
    holds_within=_equal_within,
    describe=lambda a, b: f"expected {a}, but got {b}.",
)

NOT_EQUAL = Relation(
    label="are not equal",
    holds=lambda c: c != 0,
    holds_within=lambda a, b, eps: not _equal_within(a, b, eps),
    describe=lambda a, b: f"expected a value other than {a}, but got {b}.",
)

GREATER = Relation(
    label="greater",
    holds=lambda c: c > 0,
    holds_within=lambda a, b, eps: not _equal_within(a, b, eps) and a > b,
    describe=lambda a, b: f"{a} is not greater than {b}.",
)

GREATER_EQUAL = Relation(
    label="greater equal",
    holds=lambda c: c >= 0,
    holds_within=lambda a, b, eps: _equal_within(a, b, eps) or a >= b,
    describe=lambda a, b: f"{a} is not greater than or equal to {b}.",
)

LESS = Relation(
    label="less",
    holds=lambda c: c < 0,
    holds_within=lambda a, b, eps: not _equal_within(a, b, eps) and a < b,
    describe=lambda a, b: f"{a} is not less than {b}.",
)

LESS_EQUAL = Relation(
    label="less equal",
    holds=lambda c: c <= 0,
    holds_within=lambda a, b, eps: _equal_within(a, b, eps) or a <= b,
    describe=lambda a, b: f"{a} is not less than or equal to {b}.",
)


def assertion_name(relation: Relation, suffix: str = "") -> str:
    """Build the diagnostic prefix, e.g. ``Assert greater mem``."""
    return f"Assert {relation.label}{' ' + suffix if suffix else ''}"


__all__ = [
    "EQUAL",
    "GREATER",
    "GREATER_EQUAL",
    "LESS",
    "LESS_EQUAL",
    "NOT_EQUAL",
    "Relation",
    "assertion_name",
]
