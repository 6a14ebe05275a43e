"""Demonstrates suites with setup/teardown and the assertion families.

Run with::

    eztest examples/eztest_example_basic.py -t
"""

import ctypes
import functools

import eztest

inventory: dict[str, int] = {}


@eztest.setup("Inventory")
def fill_inventory():
    inventory.update(apples=3, pears=0)


@eztest.teardown("Inventory")
def empty_inventory():
    inventory.clear()


@eztest.test_full("Inventory")
def counts():
    eztest.assert_are_equal(3, inventory["apples"])
    eztest.assert_less(inventory["pears"], inventory["apples"])


@eztest.test_full("Inventory")
def missing_item():
    eztest.assert_is_null(inventory.get("plums"))


@eztest.test("Numbers")
def unsigned_wraps():
    eztest.assert_are_equal(ctypes.c_uint8(255), ctypes.c_uint8(-1))


@eztest.test("Numbers")
def close_enough():
    eztest.assert_are_equal_precision(3.14159, 3.14, 0.01)


@eztest.test("Buffers")
def header_bytes():
    eztest.assert_are_equal_mem(b"\x89PNG", bytes([0x89, 0x50, 0x4E, 0x47]), 4)


def _by_length(a: str, b: str) -> int:
    return len(a) - len(b)


@eztest.test("Buffers")
def longer_word():
    eztest.assert_greater_cmp("banana", "kiwi", _by_length)


@eztest.test("Numbers")
def deliberately_failing():
    # Fails on purpose to show the diagnostic line.
    eztest.assert_greater(1, functools.reduce(lambda a, b: a * b, [1, 2, 3]))


if __name__ == "__main__":
    eztest.main()
