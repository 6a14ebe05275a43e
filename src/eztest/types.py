"""Shared types for the EzTest harness."""

from enum import Enum


class Outcome(Enum):
    """Classification of a single test during or after execution."""

    UNDEFINED = "undefined"  # Reset state before a test runs
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
