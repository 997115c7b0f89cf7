"""Error classes for pythcheck.

This module provides:
- PythcheckError: Base exception class for all checker errors
- ConfigError: Invalid checker configuration
- SourceError, SourceReadError, SourceParseError: Per-file input errors
- AnalysisError, MalformedTreeError, GrammarMismatchError: Structural errors
"""


class PythcheckError(Exception):
    """Base exception for all pythcheck errors."""

    pass


class ConfigError(PythcheckError):
    """Raised when checker configuration is invalid."""

    pass


class SourceError(PythcheckError):
    """Base exception for errors tied to a single source file.

    These are reported against the file and the run carries on.
    """

    pass


class SourceReadError(SourceError):
    """Raised when a source file cannot be read or decoded."""

    pass


class SourceParseError(SourceError):
    """Raised when the parser backend fails to produce a tree."""

    pass


class AnalysisError(PythcheckError):
    """Base exception for violated assumptions about the syntax tree.

    These abort the whole run.
    """

    pass


class MalformedTreeError(AnalysisError):
    """Raised when a function definition node lacks its expected children."""

    pass


class GrammarMismatchError(AnalysisError):
    """Raised when the loaded grammar lacks a node kind the detector relies on."""

    pass
