"""Shared fixtures for pythcheck tests."""

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the whole pipeline end to end",
    )


CLEAN_SOURCE = '''def add(a: int, b: int) -> int:
    return a + b


def main():
    print(add(1, 2))
'''

DIRTY_SOURCE = """def f(a, b: int = 5):
    pass
"""


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a directory with one clean file and one file with findings."""
    (tmp_path / "clean.py").write_text(CLEAN_SOURCE)
    (tmp_path / "dirty.py").write_text(DIRTY_SOURCE)
    return tmp_path
