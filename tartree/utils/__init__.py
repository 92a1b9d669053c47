# tartree/utils/__init__.py
"""Utility functions for tartree"""

from .file_utils import (
    copy_stream,
    has_extension,
    ensure_parent_dir,
    format_size,
)

__all__ = [
    "copy_stream",
    "has_extension",
    "ensure_parent_dir",
    "format_size",
]
