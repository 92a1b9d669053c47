"""Depth-first directory traversal for archiving"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .diagnostics import DiagnosticsSink, EventKind, LoggingDiagnostics


class NodeKind(Enum):
    """Filesystem node classification"""
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass
class SourceNode:
    """A filesystem node visited during archiving"""
    path: Path
    kind: NodeKind
    size: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind == NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE


def can_read(path: Path) -> bool:
    """Default readability check"""
    return os.access(path, os.R_OK)


def _classify(entry: os.DirEntry) -> NodeKind:
    # Symlinked directories and files are followed
    try:
        if entry.is_dir():
            return NodeKind.DIRECTORY
        if entry.is_file():
            return NodeKind.FILE
    except OSError:
        pass
    return NodeKind.OTHER


class TreeWalker:
    """Walks a directory tree depth-first in directory-listing order

    Directories are yielded before their contents and each directory is
    finished before the next sibling is visited. The root itself is never
    yielded. Unreadable, unlistable and unsupported nodes are reported to
    the diagnostics sink and skipped.
    """

    def __init__(self,
                 diagnostics: Optional[DiagnosticsSink] = None,
                 access_check: Callable[[Path], bool] = can_read):
        """
        Initialize tree walker

        Args:
            diagnostics: Sink for skip events (defaults to logging)
            access_check: Predicate deciding whether a node is readable
        """
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.access_check = access_check

    def walk(self, root: Path) -> Iterator[SourceNode]:
        """
        Yield every readable directory and regular file below root

        Args:
            root: Directory to walk

        Yields:
            SourceNode for each visited node
        """
        listing = self._list(Path(root))
        if listing is None:
            return

        stack: List[Iterator[os.DirEntry]] = [iter(listing)]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            path = Path(entry.path)

            if not self.access_check(path):
                self.diagnostics.skip(
                    EventKind.SKIPPED_UNREADABLE, str(path.absolute()), "Could not read file"
                )
                continue

            kind = _classify(entry)

            if kind == NodeKind.DIRECTORY:
                yield SourceNode(path=path, kind=kind)
                children = self._list(path)
                if children is not None:
                    stack.append(iter(children))
            elif kind == NodeKind.FILE:
                yield SourceNode(path=path, kind=kind, size=entry.stat().st_size)
            else:
                self.diagnostics.skip(
                    EventKind.SKIPPED_UNSUPPORTED, str(path.absolute()), "Unsupported file type"
                )

    def _list(self, directory: Path) -> Optional[List[os.DirEntry]]:
        """Read a full directory listing, closing the handle before returning"""
        try:
            with os.scandir(directory) as it:
                return list(it)
        except OSError:
            self.diagnostics.skip(
                EventKind.SKIPPED_UNLISTABLE, str(directory.absolute()), "Could not list directory"
            )
            return None
