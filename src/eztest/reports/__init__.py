"""Reporting module for EzTest output."""

from eztest.reports.base import Reporter
from eztest.reports.console import ConsoleReporter

__all__ = [
    "ConsoleReporter",
    "Reporter",
]
