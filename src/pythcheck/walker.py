"""Candidate file selection for a checker run."""

import logging
import os
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

type PathPredicate = Callable[[str], bool]
"""Returns True when an entry with the given name should be excluded."""

_DEFAULT_EXTENSION = ".py"
_TESTS_DIRECTORY = "tests"
_TEST_FILE_PREFIX = "test_"


def is_hidden(name: str) -> bool:
    """Check whether an entry name is hidden (dot-prefixed)."""
    return name.startswith(".")


def is_test_path(name: str) -> bool:
    """Check whether an entry name denotes tests (``tests`` or ``test_*``)."""
    return name == _TESTS_DIRECTORY or name.startswith(_TEST_FILE_PREFIX)


def build_predicates(ignore_hidden: bool, ignore_tests: bool) -> list[PathPredicate]:
    """Assemble the exclusion predicates selected by the run flags.

    Args:
        ignore_hidden: Exclude hidden files and directories
        ignore_tests: Exclude test files and ``tests`` directories

    Returns:
        Predicates to pass to FileWalker

    """
    predicates: list[PathPredicate] = []
    if ignore_hidden:
        predicates.append(is_hidden)
    if ignore_tests:
        predicates.append(is_test_path)
    return predicates


class FileWalker:
    """Lazily enumerates candidate source files under a root.

    This walker handles:
    - Single files: yielded as-is, whatever their name
    - Directories: walked depth first, predicates applied to every entry below
      the root so excluded directories are never descended into
    - Pattern exclusion: gitwildmatch patterns relative to the root
    """

    def __init__(
        self,
        root: Path,
        predicates: Sequence[PathPredicate] = (),
        extension: str = _DEFAULT_EXTENSION,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        """Initialise the walker.

        Args:
            root: File or directory to check
            predicates: Exclusion predicates applied to entry names
            extension: Suffix candidate files must have
            exclude_patterns: Gitwildmatch patterns to exclude

        """
        self._root = root
        self._predicates = list(predicates)
        self._extension = extension
        self._exclude_spec: pathspec.PathSpec | None = None
        if exclude_patterns:
            self._exclude_spec = pathspec.PathSpec.from_lines(
                "gitwildmatch", exclude_patterns
            )

    def iter_files(self) -> Iterator[Path]:
        """Yield candidate file paths.

        Yields:
            Paths of files to check

        """
        if self._root.is_file():
            yield self._root
            return

        yield from self._walk(self._root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Walk one directory level, recursing into admitted subdirectories."""
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            if self._is_excluded(entry):
                logger.debug("Excluded %s", entry.path)
                continue

            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                yield from self._walk(path)
            elif entry.is_file() and entry.name.endswith(self._extension):
                yield path

    def _is_excluded(self, entry: os.DirEntry[str]) -> bool:
        """Check an entry against the predicates and exclude patterns."""
        if any(predicate(entry.name) for predicate in self._predicates):
            return True

        if self._exclude_spec is None:
            return False

        relative_path = Path(entry.path).relative_to(self._root).as_posix()
        if entry.is_dir(follow_symlinks=False):
            relative_path += "/"
        return self._exclude_spec.match_file(relative_path)
