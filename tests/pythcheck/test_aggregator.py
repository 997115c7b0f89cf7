"""Tests for Aggregator and Report."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pythcheck.aggregator import Aggregator, Report
from pythcheck.config import CheckerConfig
from pythcheck.errors import MalformedTreeError
from pythcheck.formatter import BLOCK_INDENT
from pythcheck.models import FileResult

DIRTY_SOURCE = """def f(a, b: int = 5):
    pass
"""
INVALID_UTF8_SOURCE = b"def f(x):\n    pass\n\xff\xfe\n"


def _aggregator(path: Path, **properties: object) -> Aggregator:
    """Build an aggregator for a path with extra configuration."""
    return Aggregator(CheckerConfig.from_properties({"path": path, **properties}))


class TestReport:
    """Test report assembly from file results."""

    def test_clean_result_contributes_nothing(self) -> None:
        """Test that files without findings are invisible in the report."""
        report = Report()

        report.add(FileResult(path=Path("clean.py")))

        assert report.is_empty
        assert report.render() == ""
        assert report.summary.files_checked == 1
        assert report.summary.files_with_findings == 0

    def test_failed_result_is_recorded(self) -> None:
        """Test that failures are kept apart from blocks."""
        report = Report()

        report.add(FileResult(path=Path("bad.py"), error="boom"))

        assert not report.is_empty
        assert report.blocks == []
        assert report.failures == ["could not process bad.py: boom"]
        assert report.summary.failed_paths == [Path("bad.py")]
        assert report.summary.has_failures


class TestAggregatorSingleFile:
    """Test checking a single file."""

    def test_file_with_findings(self, tmp_path: Path) -> None:
        """Test the block produced for one file."""
        target = tmp_path / "dirty.py"
        target.write_text(DIRTY_SOURCE)

        report = _aggregator(target).run()

        assert report.render() == (
            f"File: {target}\n"
            f"{BLOCK_INDENT}Parameter 'a' in line 1 and column 7 is missing a type hint.\n"
            f"{BLOCK_INDENT}Function 'f' in line 1 and column 1 is missing a return type.\n"
        )
        assert report.summary.finding_count == 2

    def test_ignore_return(self, tmp_path: Path) -> None:
        """Test that ignore_return is passed to the detector."""
        target = tmp_path / "dirty.py"
        target.write_text(DIRTY_SOURCE)

        report = _aggregator(target, ignore_return=True).run()

        assert "missing a return type" not in report.render()
        assert "Parameter 'a'" in report.render()

    def test_file_without_functions(self, tmp_path: Path) -> None:
        """Test that a module without functions yields an empty report."""
        target = tmp_path / "constants.py"
        target.write_text("VALUE = 1\n")

        report = _aggregator(target).run()

        assert report.is_empty

    def test_check_file_unreadable_returns_error(self, tmp_path: Path) -> None:
        """Test that a read failure becomes a failed result."""
        aggregator = _aggregator(tmp_path)

        result = aggregator.check_file(tmp_path / "missing.py")

        assert result.failed
        assert result.findings == ()

    def test_check_file_undecodable_returns_error(self, tmp_path: Path) -> None:
        """Test that a decoding failure becomes a failed result."""
        target = tmp_path / "latin.py"
        target.write_bytes(INVALID_UTF8_SOURCE)

        result = _aggregator(target).check_file(target)

        assert result.failed
        assert "utf-8" in (result.error or "")


class TestAggregatorDirectory:
    """Test checking a directory with several workers."""

    def test_only_files_with_findings_get_blocks(self, sample_tree: Path) -> None:
        """Test one clean and one dirty file give exactly one block."""
        report = _aggregator(sample_tree).run()

        text = report.render()
        assert text.count("File: ") == 1
        assert f"File: {sample_tree / 'dirty.py'}\n" in text
        assert "clean.py" not in text
        assert report.summary.files_checked == 2
        assert report.summary.files_with_findings == 1

    def test_blocks_are_never_interleaved(self, tmp_path: Path) -> None:
        """Test that each block is contiguous under concurrent workers."""
        for index in range(20):
            (tmp_path / f"mod_{index}.py").write_text(DIRTY_SOURCE)

        report = _aggregator(tmp_path, max_workers=8).run()

        assert len(report.blocks) == 20
        for block in report.blocks:
            lines = block.splitlines()
            assert lines[0].startswith("File: ")
            assert len(lines) == 3
            assert all(line.startswith(BLOCK_INDENT) for line in lines[1:])

    def test_failed_file_does_not_stop_the_run(self, sample_tree: Path) -> None:
        """Test that other files are still reported when one fails."""
        bad = sample_tree / "broken.py"
        bad.write_bytes(INVALID_UTF8_SOURCE)

        report = _aggregator(sample_tree).run()

        assert report.summary.failed_paths == [bad]
        assert len(report.failures) == 1
        assert report.failures[0].startswith(f"could not process {bad}: ")
        assert report.render().count("File: ") == 1

    def test_predicates_applied(self, sample_tree: Path) -> None:
        """Test that ignore_tests removes test files from the run."""
        (sample_tree / "test_dirty.py").write_text(DIRTY_SOURCE)

        report = _aggregator(sample_tree, ignore_tests=True).run()

        assert "test_dirty.py" not in report.render()
        assert report.summary.files_checked == 2

    def test_explicit_paths(self, sample_tree: Path) -> None:
        """Test running over an explicit list of paths."""
        report = _aggregator(sample_tree).run([sample_tree / "clean.py"])

        assert report.is_empty
        assert report.summary.files_checked == 1

    def test_structural_error_aborts_run(self, sample_tree: Path) -> None:
        """Test that malformed trees propagate instead of being skipped."""
        aggregator = _aggregator(sample_tree)
        aggregator._detector = Mock()
        aggregator._detector.detect.side_effect = MalformedTreeError("bad tree")

        with pytest.raises(MalformedTreeError, match="bad tree"):
            aggregator.run()

    @pytest.mark.integration
    def test_runs_are_repeatable(self, sample_tree: Path) -> None:
        """Test that two runs over the same tree give the same blocks."""
        first = _aggregator(sample_tree).run()
        second = _aggregator(sample_tree).run()

        assert sorted(first.blocks) == sorted(second.blocks)
