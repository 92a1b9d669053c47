# tartree/core/compression/__init__.py
"""Compression module for tartree"""

from .utils import ArchiveFormat, detect_archive_format, get_archive_extension
from .adapters import (
    CompressionAdapter,
    GzipAdapter,
    NoCompressionAdapter,
    get_compression_adapter,
    gzip_tar_file,
)
from .tar_processor import TarProcessor

__all__ = [
    "ArchiveFormat",
    "detect_archive_format",
    "get_archive_extension",
    "CompressionAdapter",
    "GzipAdapter",
    "NoCompressionAdapter",
    "get_compression_adapter",
    "gzip_tar_file",
    "TarProcessor",
]
