"""Checks Python files for missing type hints in function parameters and return values.

Pipeline: FileWalker → SourceCodeParser → GapDetector → formatter → Aggregator
"""

from .aggregator import Aggregator, Report
from .config import CheckerConfig
from .detector import GapDetector
from .errors import (
    AnalysisError,
    ConfigError,
    GrammarMismatchError,
    MalformedTreeError,
    PythcheckError,
    SourceError,
    SourceParseError,
    SourceReadError,
)
from .formatter import format_file_block, format_finding, format_findings
from .models import (
    FileResult,
    Finding,
    MissingParameterAnnotation,
    MissingReturnAnnotation,
    Position,
    RunSummary,
)
from .node_kinds import NodeKinds
from .parser import SourceCodeParser
from .walker import FileWalker, is_hidden, is_test_path

__all__ = [
    "Aggregator",
    "AnalysisError",
    "CheckerConfig",
    "ConfigError",
    "FileResult",
    "FileWalker",
    "Finding",
    "GapDetector",
    "GrammarMismatchError",
    "MalformedTreeError",
    "MissingParameterAnnotation",
    "MissingReturnAnnotation",
    "NodeKinds",
    "Position",
    "PythcheckError",
    "Report",
    "RunSummary",
    "SourceCodeParser",
    "SourceError",
    "SourceParseError",
    "SourceReadError",
    "format_file_block",
    "format_finding",
    "format_findings",
    "is_hidden",
    "is_test_path",
]
