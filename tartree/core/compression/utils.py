"""Archive format utility functions"""

import tarfile
from enum import Enum
from pathlib import Path
from typing import Union

from ...constants import (
    GZIP_EXTENSION,
    PLAIN_EXTENSION,
    TAR_EXTENSION,
    TAR_GZ_EXTENSION,
    TAR_GZ_MARKER,
)

# Failures raised by the tar and gzip codecs while streaming
STREAM_ERRORS = (OSError, EOFError, tarfile.TarError)


class ArchiveFormat(Enum):
    """Archive formats recognised from a file name"""
    TAR = "tar"
    TAR_GZ = "tar.gz"
    INVALID = ""


def detect_archive_format(file_name: Union[str, Path]) -> ArchiveFormat:
    """
    Detect archive format from a file name

    The extension is everything after the last '.', compared case-insensitively.
    A 'gz' extension only counts as compressed tar when the name contains
    'tar.gz'. Names without a '.' use the whole name as extension.

    Args:
        file_name: File name or path

    Returns:
        Detected archive format
    """
    name_lower = Path(file_name).name.lower()
    extension = name_lower.rsplit('.', 1)[-1]

    if extension == GZIP_EXTENSION and TAR_GZ_MARKER in name_lower:
        return ArchiveFormat.TAR_GZ
    elif extension == PLAIN_EXTENSION:
        return ArchiveFormat.TAR

    return ArchiveFormat.INVALID


def get_archive_extension(archive_format: ArchiveFormat) -> str:
    """
    Get complete archive extension

    Args:
        archive_format: Archive format

    Returns:
        Complete extension (e.g., '.tar.gz'), empty for invalid formats
    """
    extensions = {
        ArchiveFormat.TAR: TAR_EXTENSION,
        ArchiveFormat.TAR_GZ: TAR_GZ_EXTENSION,
    }

    return extensions.get(archive_format, '')
