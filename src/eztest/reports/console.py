"""Terminal reporter rendered with rich."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from eztest.types import Outcome

if TYPE_CHECKING:
    from eztest.assertions.result import AssertionFailure
    from eztest.config import RunConfig
    from eztest.context import RunSummary, TestResult
    from eztest.testing.registry import TestDescriptor


STATUS_STYLES: dict[Outcome, tuple[str, str]] = {
    Outcome.PASSED: ("PASSED", "green"),
    Outcome.FAILED: ("FAILED", "red"),
    Outcome.SKIPPED: ("SKIPPED", "yellow"),
}


def _tag(descriptor_suite: str, descriptor_name: str) -> str:
    return escape(f"[{descriptor_suite} : {descriptor_name}]")


class ConsoleReporter:
    """Human-readable report on a terminal stream.

    Args:
        quiet: Suppress every line.
        no_color: Render without styling.
        show_timer: Append ``(Nms)`` to per-test lines.
        file: Target stream. Defaults to stdout.
        force_terminal: Passed to :class:`rich.console.Console`.
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        no_color: bool = False,
        show_timer: bool = False,
        file: TextIO | None = None,
        force_terminal: bool | None = None,
    ) -> None:
        self.quiet = quiet
        self.no_color = no_color
        self.show_timer = show_timer
        self.console = Console(
            file=file,
            color_system=None if no_color else "auto",
            no_color=no_color,
            force_terminal=force_terminal,
            highlight=False,
            soft_wrap=True,
        )

    @classmethod
    def from_config(cls, config: RunConfig, file: TextIO | None = None) -> ConsoleReporter:
        return cls(
            quiet=config.quiet,
            no_color=config.no_color,
            show_timer=config.show_timer,
            file=file,
        )

    def on_discovery_complete(self, count: int) -> None:
        if self.quiet:
            return
        self.console.print(f"Test discovery finished, found {count} tests.")
        self.console.print()

    def on_assertion_failed(self, failure: AssertionFailure) -> None:
        if self.quiet:
            return
        self.console.print(
            f"{_tag(failure.suite, failure.test)} "
            f"[yellow]{escape(failure.message)}[/yellow] "
            f"({escape(str(failure.location))})"
        )

    def on_test_complete(self, result: TestResult) -> None:
        if self.quiet:
            return
        descriptor: TestDescriptor = result.descriptor
        label, style = STATUS_STYLES.get(result.outcome, STATUS_STYLES[Outcome.PASSED])
        line = f"{_tag(descriptor.suite, descriptor.name)} [{style}]{label}[/{style}]"
        if self.show_timer:
            line += f" ({result.elapsed_ms}ms)"
        self.console.print(line)
        self.console.print()
        self.console.file.flush()

    def on_run_complete(self, summary: RunSummary) -> None:
        if self.quiet:
            return
        table = Table(box=box.ASCII, show_edge=True, show_lines=False)
        table.add_column("PASSED", header_style="green", style="green")
        table.add_column("SKIPPED", header_style="yellow", style="yellow")
        table.add_column("FAILED", header_style="red", style="red")
        table.add_row(str(summary.passed), str(summary.skipped), str(summary.failed))
        self.console.print(table)
        self.console.file.flush()


__all__ = ["ConsoleReporter", "STATUS_STYLES"]
