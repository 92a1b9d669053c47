"""tartree - Directory to tar archive conversion.

Packs a directory tree into a sequential tar stream, gzips existing tar
files, and unpacks .tar and .tar.gz archives back into directories.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
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

# Core API
from .api.archiver import Archiver, create_directory_tar, extract_files, gzip_tar_file

# Data models
from .models import ArchiveConfig, OperationStats, OperationType

# Format detection and diagnostics
from .core.compression import ArchiveFormat, detect_archive_format
from .core.diagnostics import CollectingDiagnostics, DiagnosticsSink, EventKind

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Archiver",

    # Core API functions
    "create_directory_tar",
    "extract_files",
    "gzip_tar_file",

    # Data models
    "ArchiveConfig",
    "OperationStats",
    "OperationType",
    "ArchiveFormat",
    "detect_archive_format",
    "CollectingDiagnostics",
    "DiagnosticsSink",
    "EventKind",

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
