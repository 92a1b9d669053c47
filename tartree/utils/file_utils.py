# tartree/utils/file_utils.py
"""File operation utilities"""

from pathlib import Path
from typing import BinaryIO, Callable, Optional

from ..constants import DEFAULT_BUFFER_SIZE


def copy_stream(src: BinaryIO,
                dst: BinaryIO,
                chunk_size: int = DEFAULT_BUFFER_SIZE,
                callback: Optional[Callable[[int], None]] = None) -> int:
    """
    Copy a byte stream through a fixed-size buffer

    Args:
        src: Readable binary stream
        dst: Writable binary stream
        chunk_size: Bytes per read
        callback: Called with the size of every chunk written

    Returns:
        Number of bytes copied
    """
    bytes_copied = 0

    while chunk := src.read(chunk_size):
        dst.write(chunk)
        bytes_copied += len(chunk)

        if callback:
            callback(len(chunk))

    return bytes_copied


def has_extension(file_path: Path, extension: str) -> bool:
    """Case-insensitive check that a file name ends with extension"""
    return file_path.name.lower().endswith(extension.lower())


def ensure_parent_dir(file_path: Path) -> Path:
    """
    Ensure parent directory exists

    Args:
        file_path: File path

    Returns:
        Parent directory path
    """
    parent = file_path.parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"
