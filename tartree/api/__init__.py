# tartree/api/__init__.py
"""API layer for tartree"""

from .exceptions import (
    TarTreeError,
    ValidationError,
    InvalidArchiveNameError,
    UnsupportedFormatError,
    SourceNotFoundError,
    SourceNotDirectoryError,
    DestinationNotDirectoryError,
    DestinationExistsError,
    PathError,
    UnsafeEntryPathError,
    ArchiveIOError,
    ConfigError,
)
from .archiver import Archiver, create_directory_tar, extract_files, gzip_tar_file

__all__ = [
    # Main classes
    "Archiver",

    # Convenience functions
    "create_directory_tar",
    "extract_files",
    "gzip_tar_file",

    # Exceptions
    "TarTreeError",
    "ValidationError",
    "InvalidArchiveNameError",
    "UnsupportedFormatError",
    "SourceNotFoundError",
    "SourceNotDirectoryError",
    "DestinationNotDirectoryError",
    "DestinationExistsError",
    "PathError",
    "UnsafeEntryPathError",
    "ArchiveIOError",
    "ConfigError",
]
