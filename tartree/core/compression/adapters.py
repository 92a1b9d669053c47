# tartree/core/compression/adapters.py
"""Compression adapter interfaces"""

import gzip
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

from .utils import STREAM_ERRORS, ArchiveFormat, get_archive_extension
from ...api.exceptions import (
    ArchiveIOError,
    DestinationExistsError,
    InvalidArchiveNameError,
    SourceNotFoundError,
)
from ...constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_COMPRESSION_LEVEL,
    MAX_COMPRESSION_LEVEL,
    MIN_COMPRESSION_LEVEL,
    TAR_EXTENSION,
    TAR_GZ_EXTENSION,
)
from ...utils.file_utils import copy_stream, has_extension

logger = logging.getLogger(__name__)


class CompressionAdapter(ABC):
    """Abstract base class for compression adapters"""

    @abstractmethod
    def get_format(self) -> ArchiveFormat:
        """Get the archive format this adapter frames"""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get compression description"""
        pass

    @abstractmethod
    def wrap_output(self, raw: BinaryIO) -> BinaryIO:
        """Wrap a raw output stream so written bytes are compressed"""
        pass

    @abstractmethod
    def wrap_input(self, raw: BinaryIO) -> BinaryIO:
        """Wrap a raw input stream so read bytes are decompressed"""
        pass

    def get_extension(self) -> str:
        """Get file extension"""
        return get_archive_extension(self.get_format())


class GzipAdapter(CompressionAdapter):
    """GZIP compression adapter

    Wrapped streams do not close the raw stream they wrap; closing the
    wrapper writes the gzip trailer.
    """

    def __init__(self, level: int = DEFAULT_COMPRESSION_LEVEL):
        if not self.validate_level(level):
            raise ValueError(f"Invalid gzip compression level: {level}")
        self.level = level

    def get_format(self) -> ArchiveFormat:
        return ArchiveFormat.TAR_GZ

    def get_description(self) -> str:
        return "GZIP compression - balanced speed and ratio"

    def wrap_output(self, raw: BinaryIO) -> BinaryIO:
        return gzip.GzipFile(fileobj=raw, mode='wb', compresslevel=self.level)

    def wrap_input(self, raw: BinaryIO) -> BinaryIO:
        return gzip.GzipFile(fileobj=raw, mode='rb')

    @staticmethod
    def validate_level(level: int) -> bool:
        return MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL


class NoCompressionAdapter(CompressionAdapter):
    """No compression adapter"""

    def get_format(self) -> ArchiveFormat:
        return ArchiveFormat.TAR

    def get_description(self) -> str:
        return "No compression - archive only"

    def wrap_output(self, raw: BinaryIO) -> BinaryIO:
        return raw

    def wrap_input(self, raw: BinaryIO) -> BinaryIO:
        return raw


# Registry of compression adapters
COMPRESSION_ADAPTERS: Dict[ArchiveFormat, CompressionAdapter] = {
    ArchiveFormat.TAR_GZ: GzipAdapter(),
    ArchiveFormat.TAR: NoCompressionAdapter(),
}


def get_compression_adapter(archive_format: ArchiveFormat,
                            level: Optional[int] = None) -> Optional[CompressionAdapter]:
    """
    Get compression adapter for an archive format

    Args:
        archive_format: Format tag of the archive
        level: Compression level, only used by compressing adapters

    Returns:
        Compression adapter or None for invalid formats
    """
    if archive_format == ArchiveFormat.TAR_GZ and level is not None:
        return GzipAdapter(level)

    return COMPRESSION_ADAPTERS.get(archive_format)


def gzip_tar_file(source_tar: Union[str, Path],
                  dest_tar_gz: Union[str, Path],
                  level: int = DEFAULT_COMPRESSION_LEVEL,
                  buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """
    Gzip an existing .tar file into a new .tar.gz file

    Args:
        source_tar: Existing plain tar archive
        dest_tar_gz: Compressed archive to create, must not exist
        level: Gzip compression level (1-9)
        buffer_size: Bytes per read

    Returns:
        Number of uncompressed bytes copied

    Raises:
        SourceNotFoundError: Source missing or not a regular file
        InvalidArchiveNameError: Source or destination has the wrong extension
        DestinationExistsError: Destination already exists
        ArchiveIOError: Reading the source or writing the destination failed
        ValueError: If level or buffer_size is out of range
    """
    if buffer_size <= 0:
        raise ValueError(f"Invalid buffer size: {buffer_size}")

    source_tar = Path(source_tar)
    dest_tar_gz = Path(dest_tar_gz)

    if not source_tar.exists():
        raise SourceNotFoundError(f"Source tar file does not exist: {source_tar}")
    if not source_tar.is_file():
        raise SourceNotFoundError(f"Source tar is not a file: {source_tar}")

    if not has_extension(source_tar, TAR_EXTENSION):
        raise InvalidArchiveNameError(source_tar.name, TAR_EXTENSION)

    if not has_extension(dest_tar_gz, TAR_GZ_EXTENSION):
        raise InvalidArchiveNameError(dest_tar_gz.name, TAR_GZ_EXTENSION)

    if dest_tar_gz.exists():
        raise DestinationExistsError(str(dest_tar_gz))

    adapter = GzipAdapter(level)
    logger.debug(f"Compressing {source_tar} to {dest_tar_gz} ({adapter.get_description()})")

    created = False
    try:
        # 'xb' refuses to clobber a file created after the existence check
        with open(source_tar, 'rb') as f_in, open(dest_tar_gz, 'xb') as raw_out:
            created = True
            with adapter.wrap_output(raw_out) as f_out:
                copied = copy_stream(f_in, f_out, buffer_size)
    except FileExistsError as e:
        raise DestinationExistsError(str(dest_tar_gz)) from e
    except STREAM_ERRORS as e:
        # Drop the partial output
        if created:
            dest_tar_gz.unlink(missing_ok=True)
        raise ArchiveIOError(f"Failed to compress {source_tar} into {dest_tar_gz}: {e}") from e

    return copied
