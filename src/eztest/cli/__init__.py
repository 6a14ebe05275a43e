"""CLI module for the EzTest runner."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from eztest.config import EzTestConfig, RunConfig, load_config
from eztest.errors import ConfigurationError, EzTestError
from eztest.testing.discovery import load_modules
from eztest.testing.runner import Runner
from eztest.version import __version__

PROGRAM_NAME = "eztest"
DISPLAY_NAME = "EzTest"
MAX_EXIT_CODE = 255


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the eztest CLI.

    Also usable from a test script: tests registered before the call are
    run together with any modules named on the command line.
    """
    try:
        config = load_config()
    except ConfigurationError as exc:
        Console(stderr=True).print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        raise SystemExit(2) from exc

    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args([*config.addopts, *args_in])

    _configure_logging(config)
    raise SystemExit(_run_tests(args, config))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Run EzTest unit tests.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{DISPLAY_NAME} version {__version__}",
        help="Print version number.",
    )
    parser.add_argument(
        "-c",
        "--no-color",
        action="store_true",
        help="Only use default color when printing to screen.",
    )
    parser.add_argument(
        "-t",
        "--timer",
        action="store_true",
        help="Display execution time for each test.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="No output.")
    parser.add_argument(
        "-s",
        "--skip",
        metavar="SUITES",
        help="Skip all tests in the comma-separated list of test suites.",
    )
    parser.add_argument("paths", nargs="*", help="Test modules or directories to load")
    return parser


def _configure_logging(config: EzTestConfig) -> None:
    if config.log_level:
        logging.basicConfig(
            level=config.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _resolve_paths(args: argparse.Namespace, config: EzTestConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _build_run_config(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        no_color=args.no_color,
        show_timer=args.timer,
        quiet=args.quiet,
        skip_enabled=args.skip is not None,
        skip_list=args.skip,
    )


def _run_tests(args: argparse.Namespace, config: EzTestConfig) -> int:
    run_config = _build_run_config(args)

    try:
        load_modules(_resolve_paths(args, config))
    except (EzTestError, FileNotFoundError) as exc:
        Console(stderr=True).print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 2

    failed = Runner().run(run_config)
    return min(failed, MAX_EXIT_CODE)


__all__ = ["PROGRAM_NAME", "main"]
