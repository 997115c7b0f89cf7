"""Data models for findings and run results."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict
from tree_sitter import Node


class Position(BaseModel):
    """Span of a node in the source, 0-based rows and columns."""

    model_config = ConfigDict(frozen=True)

    start_row: int
    start_column: int
    end_row: int
    end_column: int

    @classmethod
    def from_node(cls, node: Node) -> "Position":
        """Build a position from a tree-sitter node span."""
        start_row, start_column = node.start_point
        end_row, end_column = node.end_point
        return cls(
            start_row=start_row,
            start_column=start_column,
            end_row=end_row,
            end_column=end_column,
        )


class MissingReturnAnnotation(BaseModel):
    """A function definition without a return type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_return"] = "missing_return"
    function_name: str
    position: Position


class MissingParameterAnnotation(BaseModel):
    """A parameter without a type hint."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_parameter"] = "missing_parameter"
    parameter_name: str
    position: Position


type Finding = MissingReturnAnnotation | MissingParameterAnnotation


class FileResult(BaseModel):
    """Outcome of checking one candidate file.

    ``text`` is the rendered diagnostic lines (empty when clean) and
    ``error`` is set instead when the file could not be processed.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    findings: tuple[Finding, ...] = ()
    text: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Whether the file could not be processed."""
        return self.error is not None


class RunSummary(BaseModel):
    """Counts gathered over a whole run."""

    files_checked: int = 0
    files_with_findings: int = 0
    finding_count: int = 0
    failed_paths: list[Path] = []

    @property
    def has_failures(self) -> bool:
        """Whether any file could not be processed."""
        return bool(self.failed_paths)
