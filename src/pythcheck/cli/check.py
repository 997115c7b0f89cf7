"""CLI command implementation for checking files."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from pythcheck.aggregator import Aggregator, Report
from pythcheck.cli.errors import CLIError, cli_error_handler
from pythcheck.config import CheckerConfig
from pythcheck.errors import ConfigError
from pythcheck.logging import setup_logging

logger = logging.getLogger(__name__)

# Shown when a run reports nothing
SUCCESS_SENTINEL = "✨ All good!"

# Report text is written verbatim: no markup, emoji codes or wrapping
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def _build_config(  # noqa: PLR0913 - mirrors the CLI options
    path: Path,
    ignore_hidden: bool,
    ignore_tests: bool,
    ignore_return: bool,
    exclude: list[str] | None,
    jobs: int | None,
) -> CheckerConfig:
    """Validate CLI options into a checker configuration.

    Raises:
        CLIError: If the options are invalid.

    """
    try:
        return CheckerConfig.from_properties(
            {
                "path": path,
                "ignore_hidden": ignore_hidden,
                "ignore_tests": ignore_tests,
                "ignore_return": ignore_return,
                "exclude_patterns": exclude or None,
                "max_workers": jobs,
            }
        )
    except ConfigError as e:
        raise CLIError(str(e), command="check", original_error=e) from e


def print_report(report: Report) -> None:
    """Print the report to stdout and failures to stderr.

    Args:
        report: Report of a finished run

    """
    if report.is_empty:
        console.out(SUCCESS_SENTINEL)
        return

    text = report.render()
    if text:
        console.out(text, end="")

    for failure in report.failures:
        error_console.out(failure)


def check_command(  # noqa: PLR0913 - CLI entry point with many options
    path: Path,
    ignore_hidden: bool = False,
    ignore_tests: bool = False,
    ignore_return: bool = False,
    exclude: list[str] | None = None,
    jobs: int | None = None,
    verbose: bool = False,
    log_level: str = "WARNING",
) -> None:
    """Check a file or directory for missing type hints.

    Exits with code 1 when any file could not be processed.

    Args:
        path: File or directory to check
        ignore_hidden: Skip hidden files and directories
        ignore_tests: Skip test files and directories
        ignore_return: Do not report missing return types
        exclude: Gitwildmatch patterns to exclude
        jobs: Number of worker threads
        verbose: Enable verbose output (sets log level to DEBUG)
        log_level: Logging level

    """
    setup_logging(level="DEBUG" if verbose else log_level)

    with cli_error_handler("check", "Check failed"):
        config = _build_config(
            path, ignore_hidden, ignore_tests, ignore_return, exclude, jobs
        )
        logger.info("Checking %s", config.path)
        report = Aggregator(config).run()

    print_report(report)

    if report.summary.has_failures:
        logger.error(
            "%d file(s) could not be processed", len(report.summary.failed_paths)
        )
        raise typer.Exit(1)
