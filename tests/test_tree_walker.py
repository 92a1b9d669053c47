"""Tests for depth-first tree traversal."""

import os
from pathlib import Path
from typing import List

import pytest

from tartree.core.diagnostics import CollectingDiagnostics, EventKind
from tartree.core.tree_walker import NodeKind, TreeWalker


def _relative(root: Path, nodes) -> List[str]:
    return [node.path.relative_to(root).as_posix() for node in nodes]


def test_walk_visits_every_node_except_root(sample_tree: Path) -> None:
    names = _relative(sample_tree, TreeWalker().walk(sample_tree))

    assert sorted(names) == sorted([
        "README.md",
        "docs",
        "docs/index.txt",
        "docs/guides",
        "docs/guides/intro.txt",
        "bin",
        "bin/blob.dat",
        "bin/zero.dat",
        "empty",
    ])


def test_walk_yields_directory_before_its_contiguous_subtree(sample_tree: Path) -> None:
    names = _relative(sample_tree, TreeWalker().walk(sample_tree))

    for directory in ("docs", "docs/guides", "bin"):
        start = names.index(directory)
        inside = [i for i, name in enumerate(names) if name.startswith(directory + "/")]
        assert inside
        assert inside == list(range(start + 1, start + 1 + len(inside)))


def test_walk_reports_kinds_and_sizes(sample_tree: Path) -> None:
    nodes = {
        node.path.relative_to(sample_tree).as_posix(): node
        for node in TreeWalker().walk(sample_tree)
    }

    assert nodes["docs"].kind == NodeKind.DIRECTORY
    assert nodes["bin/blob.dat"].is_file
    assert nodes["bin/blob.dat"].size == 256 * 20
    assert nodes["bin/zero.dat"].size == 0


def test_walk_of_empty_directory_yields_nothing(tmp_path: Path) -> None:
    assert list(TreeWalker().walk(tmp_path)) == []


def test_unreadable_node_is_skipped_and_reported(sample_tree: Path) -> None:
    diagnostics = CollectingDiagnostics()
    blocked = sample_tree / "docs"
    walker = TreeWalker(diagnostics, access_check=lambda path: path != blocked)

    names = _relative(sample_tree, walker.walk(sample_tree))

    assert not any(name.startswith("docs") for name in names)
    assert "README.md" in names
    events = diagnostics.of_kind(EventKind.SKIPPED_UNREADABLE)
    assert [event.path for event in events] == [str(blocked.absolute())]
    assert events[0].message == "Could not read file"


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="permission bits are ignored for root")
def test_permission_denied_file_is_skipped(sample_tree: Path) -> None:
    locked = sample_tree / "docs" / "index.txt"
    locked.chmod(0)
    diagnostics = CollectingDiagnostics()

    try:
        names = _relative(sample_tree, TreeWalker(diagnostics).walk(sample_tree))
    finally:
        locked.chmod(0o644)

    assert "docs/index.txt" not in names
    assert "docs/guides/intro.txt" in names
    assert diagnostics.paths == [str(locked.absolute())]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes unavailable")
def test_special_file_is_skipped_as_unsupported(sample_tree: Path) -> None:
    fifo = sample_tree / "pipe"
    os.mkfifo(fifo)
    diagnostics = CollectingDiagnostics()

    names = _relative(sample_tree, TreeWalker(diagnostics).walk(sample_tree))

    assert "pipe" not in names
    events = diagnostics.of_kind(EventKind.SKIPPED_UNSUPPORTED)
    assert [event.path for event in events] == [str(fifo.absolute())]


def test_missing_root_is_reported_as_unlistable(tmp_path: Path) -> None:
    diagnostics = CollectingDiagnostics()

    assert list(TreeWalker(diagnostics).walk(tmp_path / "missing")) == []
    assert diagnostics.of_kind(EventKind.SKIPPED_UNLISTABLE)
