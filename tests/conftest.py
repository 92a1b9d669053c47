"""Shared fixtures for tartree tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A small tree with nested files, a binary file and an empty directory."""
    root = tmp_path / "source"
    (root / "docs" / "guides").mkdir(parents=True)
    (root / "bin").mkdir()
    (root / "empty").mkdir()

    (root / "README.md").write_text("# sample\n")
    (root / "docs" / "index.txt").write_text("index\n")
    (root / "docs" / "guides" / "intro.txt").write_text("intro " * 500)
    (root / "bin" / "blob.dat").write_bytes(bytes(range(256)) * 20)
    (root / "bin" / "zero.dat").write_bytes(b"")
    return root
