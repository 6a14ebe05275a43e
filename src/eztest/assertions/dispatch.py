"""Selection of the comparison kind from the type of an assertion operand.

The first operand decides how both operands are compared:

======================================  ===================
Type of first operand                   Kind
======================================  ===================
``int``, ctypes signed integers         ``SIGNED``
``bool``, ctypes unsigned integers      ``UNSIGNED``
``float``, ctypes floating types        ``FLOATING``
``bytes``, ``bytearray``, ``c_char_p``  ``STRING``
``str``, ``c_wchar_p``                  ``WIDE_STRING``
anything else                           ``UNSUPPORTED``
======================================  ===================

``None`` is a null string: when it is the first operand the kind of the
second operand is used, and two ``None`` operands compare as strings.
"""

from __future__ import annotations

import ctypes
import numbers
import operator
import sys
from enum import Enum
from functools import singledispatch
from typing import Any

DEFAULT_EPSILON = sys.float_info.epsilon
UINTMAX_MODULUS = 2**64


class ComparisonKind(Enum):
    SIGNED = "signed integer"
    UNSIGNED = "unsigned integer"
    FLOATING = "floating point"
    STRING = "byte string"
    WIDE_STRING = "wide string"
    UNSUPPORTED = "unsupported"

    @property
    def is_string(self) -> bool:
        return self in (ComparisonKind.STRING, ComparisonKind.WIDE_STRING)


class IncompatibleOperand(TypeError):
    """An operand cannot be converted to the selected comparison kind."""

    def __init__(self, value: Any, kind: ComparisonKind) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"{type(value).__name__} is not a {kind.value}")


@singledispatch
def comparison_kind(value: Any) -> ComparisonKind:
    return ComparisonKind.UNSUPPORTED


@comparison_kind.register(int)
@comparison_kind.register(ctypes.c_byte)
@comparison_kind.register(ctypes.c_short)
@comparison_kind.register(ctypes.c_int)
@comparison_kind.register(ctypes.c_long)
@comparison_kind.register(ctypes.c_longlong)
def _(value: Any) -> ComparisonKind:
    return ComparisonKind.SIGNED


@comparison_kind.register(bool)
@comparison_kind.register(ctypes.c_bool)
@comparison_kind.register(ctypes.c_ubyte)
@comparison_kind.register(ctypes.c_ushort)
@comparison_kind.register(ctypes.c_uint)
@comparison_kind.register(ctypes.c_ulong)
@comparison_kind.register(ctypes.c_ulonglong)
def _(value: Any) -> ComparisonKind:
    return ComparisonKind.UNSIGNED


@comparison_kind.register(float)
@comparison_kind.register(ctypes.c_float)
@comparison_kind.register(ctypes.c_double)
@comparison_kind.register(ctypes.c_longdouble)
def _(value: Any) -> ComparisonKind:
    return ComparisonKind.FLOATING


@comparison_kind.register(bytes)
@comparison_kind.register(bytearray)
@comparison_kind.register(ctypes.c_char_p)
def _(value: Any) -> ComparisonKind:
    return ComparisonKind.STRING


@comparison_kind.register(str)
@comparison_kind.register(ctypes.c_wchar_p)
def _(value: Any) -> ComparisonKind:
    return ComparisonKind.WIDE_STRING


def select_kind(first: Any, second: Any) -> ComparisonKind:
    """Pick the comparison kind for an operand pair."""
    if first is not None:
        return comparison_kind(first)
    if second is not None:
        kind = comparison_kind(second)
        # A null first operand only makes sense as a null string.
        return kind if kind.is_string else ComparisonKind.UNSUPPORTED
    return ComparisonKind.STRING


def unwrap(value: Any) -> Any:
    """Return the Python value held by a ctypes scalar, or ``value`` itself."""
    if isinstance(value, ctypes._SimpleCData):
        return value.value
    return value


def coerce(value: Any, kind: ComparisonKind) -> Any:
    """Convert an operand to the representation compared under ``kind``.

    Raises:
        IncompatibleOperand: If the operand does not belong to ``kind``.
    """
    raw = unwrap(value)

    if kind is ComparisonKind.SIGNED:
        try:
            return operator.index(raw)
        except TypeError:
            raise IncompatibleOperand(value, kind) from None

    if kind is ComparisonKind.UNSIGNED:
        try:
            return operator.index(raw) % UINTMAX_MODULUS
        except TypeError:
            raise IncompatibleOperand(value, kind) from None

    if kind is ComparisonKind.FLOATING:
        if not isinstance(raw, numbers.Real):
            raise IncompatibleOperand(value, kind)
        try:
            return float(raw)
        except OverflowError:
            raise IncompatibleOperand(value, kind) from None

    if kind is ComparisonKind.STRING:
        if raw is None or isinstance(raw, (bytes, bytearray)):
            return None if raw is None else bytes(raw)
        raise IncompatibleOperand(value, kind)

    if kind is ComparisonKind.WIDE_STRING:
        if raw is None or isinstance(raw, str):
            return raw
        raise IncompatibleOperand(value, kind)

    raise IncompatibleOperand(value, kind)


def three_way(a: Any, b: Any) -> int:
    """Compare two coerced operands; ``None`` sorts below everything."""
    if a is None or b is None:
        return (a is not None) - (b is not None)
    return (a > b) - (a < b)


def format_value(value: Any, kind: ComparisonKind) -> str:
    """Render a coerced operand for a diagnostic."""
    if value is None:
        return "None"
    if kind is ComparisonKind.STRING:
        return f"'{value.decode('utf-8', 'backslashreplace')}'"
    if kind is ComparisonKind.WIDE_STRING:
        return f"'{value}'"
    return repr(value)


__all__ = [
    "DEFAULT_EPSILON",
    "ComparisonKind",
    "IncompatibleOperand",
    "coerce",
    "comparison_kind",
    "format_value",
    "select_kind",
    "three_way",
    "unwrap",
]
