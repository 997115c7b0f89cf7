"""Rendering of findings into human-readable diagnostics."""

from collections.abc import Sequence
from pathlib import Path

from pythcheck.models import Finding, MissingReturnAnnotation

# Prefix for diagnostic lines inside a file block
BLOCK_INDENT = "    "

# Line index offset (tree-sitter uses 0-based, we want 1-based)
_INDEX_OFFSET = 1


def format_finding(finding: Finding) -> str:
    """Render a single finding as one diagnostic line (no newline).

    Args:
        finding: Finding to render

    Returns:
        Diagnostic line

    """
    line = finding.position.start_row + _INDEX_OFFSET
    column = finding.position.start_column + _INDEX_OFFSET

    if isinstance(finding, MissingReturnAnnotation):
        return (
            f"Function '{finding.function_name}' in line {line} "
            f"and column {column} is missing a return type."
        )
    return (
        f"Parameter '{finding.parameter_name}' in line {line} "
        f"and column {column} is missing a type hint."
    )


def format_findings(findings: Sequence[Finding]) -> str:
    """Render findings in input order, one newline-terminated line each.

    Args:
        findings: Findings of one file

    Returns:
        Rendered text, empty when there are no findings

    """
    return "".join(f"{format_finding(finding)}\n" for finding in findings)


def format_file_block(path: Path | str, text: str) -> str:
    """Render the report block for one file.

    Args:
        path: File the diagnostics belong to
        text: Output of ``format_findings`` for that file

    Returns:
        ``File: <path>`` header plus indented diagnostics, or an empty
        string when the file has nothing to report

    """
    if not text:
        return ""
    lines = "".join(f"{BLOCK_INDENT}{line}\n" for line in text.splitlines())
    return f"File: {path}\n{lines}"


def format_failure(path: Path | str, reason: str) -> str:
    """Render the one-line diagnostic for a file that could not be processed."""
    return f"could not process {path}: {reason}"
