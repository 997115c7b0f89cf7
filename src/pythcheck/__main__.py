"""Main entry point for pythcheck.

Checks Python files for missing type hints in function parameters and
return values.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from pythcheck.cli import check_command

app = typer.Typer(name="pythcheck", add_completion=False)


def _version_callback(value: bool) -> None:
    """Print the installed version and exit."""
    if not value:
        return
    try:
        installed = version("pythcheck")
    except PackageNotFoundError:
        installed = "unknown"
    typer.echo(f"pythcheck {installed}")
    raise typer.Exit()


@app.command()
def check(  # noqa: PLR0913 - CLI entry point with many options
    path: Annotated[
        Path,
        typer.Argument(
            help="Python file or directory to check",
            exists=True,
            file_okay=True,
            dir_okay=True,
            readable=True,
        ),
    ],
    ignore_hidden: Annotated[
        bool,
        typer.Option(
            "--ignore-hidden",
            help="Skip files and directories whose name starts with '.'",
            rich_help_panel="Selection",
        ),
    ] = False,
    ignore_tests: Annotated[
        bool,
        typer.Option(
            "--ignore-tests",
            help="Skip 'tests' directories and 'test_*' files",
            rich_help_panel="Selection",
        ),
    ] = False,
    ignore_return: Annotated[
        bool,
        typer.Option(
            "--ignore-return",
            help="Do not report missing return types",
        ),
    ] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            help="Gitwildmatch pattern to exclude, relative to PATH (repeatable)",
            rich_help_panel="Selection",
        ),
    ] = None,
    jobs: Annotated[
        int | None,
        typer.Option(
            "--jobs",
            "-j",
            help="Number of worker threads, defaults to the CPU count",
            min=1,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "WARNING",
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Check missing type hints in function definitions for Python files.

    Example:
        pythcheck src/ --ignore-tests --ignore-hidden
        pythcheck script.py --ignore-return

    """
    check_command(
        path,
        ignore_hidden=ignore_hidden,
        ignore_tests=ignore_tests,
        ignore_return=ignore_return,
        exclude=exclude,
        jobs=jobs,
        verbose=verbose,
        log_level=log_level,
    )


def main() -> None:
    """Run the pythcheck CLI."""
    app()


if __name__ == "__main__":
    main()
