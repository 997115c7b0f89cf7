"""Parallel checking of candidate files and assembly of the report.

Workers run in a thread pool and each returns a FileResult. The calling
thread is the only one that touches the report, appending results as they
complete, so no lock is needed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from pythcheck.config import CheckerConfig
from pythcheck.detector import GapDetector
from pythcheck.errors import SourceError
from pythcheck.formatter import format_failure, format_file_block, format_findings
from pythcheck.models import FileResult, RunSummary
from pythcheck.node_kinds import NodeKinds
from pythcheck.parser import SourceCodeParser, get_python_language
from pythcheck.walker import FileWalker, build_predicates

logger = logging.getLogger(__name__)


@dataclass
class Report:
    """Per-file blocks and failures of one run, in completion order."""

    blocks: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    summary: RunSummary = field(default_factory=RunSummary)

    @property
    def is_empty(self) -> bool:
        """Whether the run produced neither findings nor failures."""
        return not self.blocks and not self.failures

    def add(self, result: FileResult) -> None:
        """Record the result of one file."""
        self.summary.files_checked += 1

        if result.error is not None:
            self.summary.failed_paths.append(result.path)
            self.failures.append(format_failure(result.path, result.error))
            return

        block = format_file_block(result.path, result.text)
        if block:
            self.blocks.append(block)
            self.summary.files_with_findings += 1
            self.summary.finding_count += len(result.findings)

    def render(self) -> str:
        """Return the report text, one block per file."""
        return "".join(self.blocks)


class Aggregator:
    """Runs the gap detector over many files with a fixed-size worker pool."""

    def __init__(self, config: CheckerConfig) -> None:
        """Initialise the aggregator.

        Args:
            config: Validated checker configuration

        Raises:
            GrammarMismatchError: If the installed grammar lacks a needed node kind

        """
        self._config = config
        self._detector = GapDetector(NodeKinds.for_language(get_python_language()))

    def collect_paths(self) -> Iterable[Path]:
        """Enumerate the candidate files selected by the configuration."""
        walker = FileWalker(
            self._config.path,
            predicates=build_predicates(
                self._config.ignore_hidden, self._config.ignore_tests
            ),
            extension=self._config.extension,
            exclude_patterns=self._config.exclude_patterns,
        )
        return walker.iter_files()

    def run(self, paths: Iterable[Path] | None = None) -> Report:
        """Check files in parallel and merge their results.

        Args:
            paths: Files to check, defaults to the configured walk

        Returns:
            Report of the run

        Raises:
            AnalysisError: If any tree violates the detector's assumptions

        """
        if paths is None:
            paths = self.collect_paths()

        max_workers = self._config.max_workers or os.cpu_count() or 1
        report = Report()

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(self.check_file, path) for path in paths]
            logger.debug("Submitted %d files to %d workers", len(futures), max_workers)

            for future in as_completed(futures):
                report.add(future.result())

        logger.info(
            "Checked %d files: %d with findings, %d findings, %d failed",
            report.summary.files_checked,
            report.summary.files_with_findings,
            report.summary.finding_count,
            len(report.summary.failed_paths),
        )
        return report

    def check_file(self, path: Path) -> FileResult:
        """Read, parse and check a single file.

        Input errors are returned as a failed FileResult; analysis errors
        propagate.

        Args:
            path: File to check

        Returns:
            Result for the file

        """
        parser = SourceCodeParser(encoding=self._config.encoding)
        try:
            tree, source = parser.parse_file(path)
        except SourceError as e:
            logger.warning("Could not process %s: %s", path, e)
            return FileResult(path=path, error=str(e))

        findings = self._detector.detect(
            source, tree.root_node, ignore_return=self._config.ignore_return
        )
        logger.debug("%s: %d findings", path, len(findings))
        return FileResult(
            path=path, findings=tuple(findings), text=format_findings(findings)
        )
