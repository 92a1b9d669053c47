"""Path resolution between filesystem nodes and archive entries"""

import os
from pathlib import Path
from typing import List, Union

from ..api.exceptions import UnsafeEntryPathError


def relative_entry_path(root: Union[str, Path], node: Union[str, Path]) -> str:
    """Get the archive-relative path of a node inside root

    Args:
        root: Root directory of the tree being archived
        node: Path of a file or directory below root

    Returns:
        Node path with the root prefix stripped, using '/' separators
        and no leading separator

    Raises:
        ValueError: If node is not located under root
    """
    root_abs = os.path.abspath(root)
    node_abs = os.path.abspath(node)

    prefix = root_abs if root_abs.endswith(os.sep) else root_abs + os.sep
    if not node_abs.startswith(prefix):
        raise ValueError(f"{node_abs} is not inside archive root {root_abs}")

    relative = node_abs[len(root_abs):]
    if os.sep != "/":
        relative = relative.replace(os.sep, "/")

    return relative.lstrip("/")


def entry_parts(entry_path: str) -> List[str]:
    """Split an entry name into path segments

    Backslashes count as separators; empty and '.' segments are dropped.

    Raises:
        UnsafeEntryPathError: If a segment is '..'
    """
    parts = [
        part for part in entry_path.replace("\\", "/").split("/")
        if part not in ("", ".")
    ]

    if ".." in parts:
        raise UnsafeEntryPathError(entry_path, "parent directory segment")

    return parts


def destination_path(dest_root: Union[str, Path], entry_path: str) -> Path:
    """Get the filesystem path an archive entry extracts to

    Args:
        dest_root: Extraction root directory
        entry_path: Entry name as stored in the archive

    Returns:
        Path below dest_root

    Raises:
        UnsafeEntryPathError: If the entry is empty or would land outside dest_root
    """
    parts = entry_parts(entry_path)
    if not parts:
        raise UnsafeEntryPathError(entry_path, "empty path")

    root = Path(dest_root)
    target = root.joinpath(*parts)

    # Symlinks already present under the root may still redirect the write
    root_resolved = root.resolve()
    target_resolved = target.resolve()
    if target_resolved != root_resolved and root_resolved not in target_resolved.parents:
        raise UnsafeEntryPathError(entry_path)

    return target


class ArchivePathResolver:
    """Resolves entry paths against a fixed archive root"""

    def __init__(self, root: Union[str, Path]):
        """Initialize path resolver

        Args:
            root: Source directory when archiving, destination when extracting
        """
        self.root = Path(os.path.abspath(root))

    def relative_entry_path(self, node: Union[str, Path]) -> str:
        """Archive-relative path of node"""
        return relative_entry_path(self.root, node)

    def destination_path(self, entry_path: str) -> Path:
        """Extraction target of entry_path"""
        return destination_path(self.root, entry_path)
