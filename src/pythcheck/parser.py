"""Python source parser using tree-sitter."""

import logging
from pathlib import Path

import tree_sitter_python
from tree_sitter import Language, Parser, Tree

from pythcheck.errors import SourceParseError, SourceReadError

logger = logging.getLogger(__name__)

_PYTHON_LANGUAGE = Language(tree_sitter_python.language())

# Constants
_DEFAULT_ENCODING = "utf-8"


def get_python_language() -> Language:
    """Return the tree-sitter Python language binding."""
    return _PYTHON_LANGUAGE


class SourceCodeParser:
    """Parser for Python source code using tree-sitter.

    A tree-sitter ``Parser`` keeps internal state between calls, so each
    worker thread builds its own instance.
    """

    def __init__(self, encoding: str = _DEFAULT_ENCODING) -> None:
        """Initialise the parser.

        Args:
            encoding: Text encoding source files are expected to use

        """
        self.encoding = encoding
        self.parser = Parser()
        self.parser.language = _PYTHON_LANGUAGE

    def parse(self, source: bytes) -> Tree:
        """Parse a buffer of source bytes.

        Args:
            source: Raw source code

        Returns:
            Parsed syntax tree

        Raises:
            SourceParseError: If tree-sitter fails to produce a tree

        """
        try:
            tree = self.parser.parse(source)
        except (ValueError, TypeError) as e:
            raise SourceParseError(f"tree-sitter failed to parse source: {e}") from e

        if tree is None:
            raise SourceParseError("tree-sitter returned no tree")
        return tree

    def parse_file(self, file_path: Path) -> tuple[Tree, bytes]:
        """Read and parse a source file.

        The file must decode cleanly with the configured encoding; the tree is
        built from its UTF-8 bytes so that node text can always be sliced
        back out as UTF-8.

        Args:
            file_path: Path to the source file

        Returns:
            Tuple of the parsed tree and the source bytes it was built from

        Raises:
            SourceReadError: If the file cannot be read or decoded
            SourceParseError: If parsing fails

        """
        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise SourceReadError(e.strerror or str(e)) from e

        try:
            text = raw.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise SourceReadError(f"not valid {self.encoding} text: {e}") from e

        source = (
            raw if self.encoding.lower() in ("utf-8", "utf8") else text.encode("utf-8")
        )
        tree = self.parse(source)
        if tree.root_node.has_error:
            logger.debug("Syntax errors in %s, analysing partial tree", file_path)
        return tree, source
