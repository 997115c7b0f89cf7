"""CLI command implementations for pythcheck."""

from pythcheck.cli.check import SUCCESS_SENTINEL, check_command
from pythcheck.cli.errors import CLIError

__all__ = [
    "CLIError",
    "SUCCESS_SENTINEL",
    "check_command",
]
