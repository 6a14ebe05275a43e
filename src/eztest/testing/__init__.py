"""Test registration, discovery and execution.

Tests register themselves at import time through decorators; the runner
walks the registry in declaration order.
"""

from .registry import (
    BASE_DESCRIPTOR,
    MARKER,
    TestDescriptor,
    clear_registry,
    get_registry,
    setup,
    teardown,
    test,
    test_full,
)
from .discovery import discover, load_modules
from .runner import Runner, run


__all__ = [
    "BASE_DESCRIPTOR",
    "MARKER",
    "TestDescriptor",
    "clear_registry",
    "get_registry",
    "setup",
    "teardown",
    "test",
    "test_full",
    "discover",
    "load_modules",
    "Runner",
    "run",
]
