"""Assertions over raw memory blocks.

Operands are ``None`` or any object exposing the buffer protocol
(``bytes``, ``bytearray``, ``memoryview``, ``array.array``, ctypes
instances). The first ``size`` bytes are compared as unsigned bytes; a
``size`` larger than a block is rejected with :class:`ValueError`.
"""

from __future__ import annotations

from typing import Any

from eztest.assertions._base import check, unsupported
from eztest.assertions.dispatch import three_way
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

HEXDUMP_LIMIT = 16


def _read(block: Any, size: int) -> bytes | None:
    if block is None:
        return None
    data = memoryview(block).tobytes()
    if size > len(data):
        msg = f"size {size} exceeds the {len(data)}-byte block"
        raise ValueError(msg)
    return data[:size]


def hexdump(data: bytes | None) -> str:
    """Render at most ``HEXDUMP_LIMIT`` bytes as hex, with ``...`` if cut."""
    if data is None:
        return "None"
    shown = " ".join(f"{byte:02x}" for byte in data[:HEXDUMP_LIMIT])
    if len(data) > HEXDUMP_LIMIT:
        shown += " ..."
    return f"[{shown}]"


def _compare_mem(relation: Relation, first: Any, second: Any, size: int) -> bool:
    if size < 0:
        msg = f"size must be >= 0, got {size}"
        raise ValueError(msg)

    name = assertion_name(relation, "mem")
    try:
        a = _read(first, size)
    except TypeError:
        return unsupported(name, first)
    try:
        b = _read(second, size)
    except TypeError:
        return unsupported(name, second)

    return check(
        name,
        relation.holds(three_way(a, b)),
        lambda: relation.describe(hexdump(a), hexdump(b)),
    )


def assert_are_equal_mem(expected: Any, actual: Any, size: int) -> bool:
    """Assert that the first ``size`` bytes of both blocks are equal.

    Two ``None`` blocks are equal; ``None`` never equals a real block.
    """
    return _compare_mem(EQUAL, expected, actual, size)


def assert_are_not_equal_mem(unexpected: Any, actual: Any, size: int) -> bool:
    return _compare_mem(NOT_EQUAL, unexpected, actual, size)


def assert_greater_mem(block: Any, other: Any, size: int) -> bool:
    return _compare_mem(GREATER, block, other, size)


def assert_greater_equal_mem(block: Any, other: Any, size: int) -> bool:
    return _compare_mem(GREATER_EQUAL, block, other, size)


def assert_less_mem(block: Any, other: Any, size: int) -> bool:
    return _compare_mem(LESS, block, other, size)


def assert_less_equal_mem(block: Any, other: Any, size: int) -> bool:
    return _compare_mem(LESS_EQUAL, block, other, size)
