# tartree/core/compression/tar_processor.py
"""Tar archive writer and extractor"""

import logging
import os
import stat
import tarfile
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .adapters import get_compression_adapter
from .utils import STREAM_ERRORS, ArchiveFormat, detect_archive_format
from ..diagnostics import (
    CollectingDiagnostics,
    DiagnosticsSink,
    EventKind,
    LoggingDiagnostics,
    TeeDiagnostics,
)
from ..path_resolver import ArchivePathResolver, entry_parts
from ..tree_walker import SourceNode, TreeWalker, can_read
from ...api.exceptions import (
    ArchiveIOError,
    DestinationNotDirectoryError,
    InvalidArchiveNameError,
    SourceNotDirectoryError,
    SourceNotFoundError,
    UnsupportedFormatError,
)
from ...constants import DEFAULT_BUFFER_SIZE, TAR_EXTENSION
from ...models.result import OperationStats, OperationType
from ...utils.file_utils import copy_stream, ensure_parent_dir, has_extension

logger = logging.getLogger(__name__)


class TarProcessor:
    """
    Streams directory trees into tar archives and back

    Archives are read and written sequentially: one entry at a time, with
    at most one source file and one destination file open, and contents
    copied through a fixed-size buffer.
    """

    def __init__(self,
                 diagnostics: Optional[DiagnosticsSink] = None,
                 buffer_size: int = DEFAULT_BUFFER_SIZE,
                 access_check: Callable[[Path], bool] = can_read):
        """
        Initialize tar processor

        Args:
            diagnostics: Sink for skipped nodes and members
            buffer_size: Bytes per read when copying contents
            access_check: Readability predicate used while walking

        Raises:
            ValueError: If buffer_size is not positive
        """
        if buffer_size <= 0:
            raise ValueError(f"Invalid buffer size: {buffer_size}")

        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.buffer_size = buffer_size
        self.access_check = access_check

    def create_directory_tar(self,
                             source_dir: Union[str, Path],
                             dest_archive_file: Union[str, Path],
                             include_directories: bool = False) -> OperationStats:
        """
        Tar up a directory recursively

        Args:
            source_dir: Directory whose contents are archived
            dest_archive_file: Archive to create or overwrite, must end with .tar
            include_directories: Also write directory entries

        Returns:
            Operation statistics

        Raises:
            InvalidArchiveNameError: Destination does not end with .tar
            SourceNotFoundError: Source directory does not exist
            SourceNotDirectoryError: Source is not a directory
            ArchiveIOError: Reading a file or writing the archive failed
        """
        source_dir = Path(source_dir)
        dest_archive_file = Path(dest_archive_file)

        if not has_extension(dest_archive_file, TAR_EXTENSION):
            raise InvalidArchiveNameError(dest_archive_file.name, TAR_EXTENSION)

        if not source_dir.exists():
            raise SourceNotFoundError(f"Source directory does not exist: {source_dir}")
        if not source_dir.is_dir():
            raise SourceNotDirectoryError(str(source_dir))

        stats = OperationStats(
            operation_type=OperationType.CREATE,
            source=str(source_dir),
            destination=str(dest_archive_file),
        )
        collected = CollectingDiagnostics()
        diagnostics = TeeDiagnostics(self.diagnostics, collected)
        walker = TreeWalker(diagnostics, self.access_check)
        resolver = ArchivePathResolver(source_dir)

        try:
            with open(dest_archive_file, 'wb') as raw, tarfile.open(
                    fileobj=raw,
                    mode='w|',
                    format=tarfile.GNU_FORMAT,
                    copybufsize=self.buffer_size) as tar:
                # The archive may live inside the tree it is built from
                dest_stat = os.fstat(raw.fileno())

                for node in walker.walk(source_dir):
                    entry_name = resolver.relative_entry_path(node.path)

                    if node.is_dir:
                        if include_directories:
                            self._add_directory(tar, node, entry_name)
                            stats.processed_dirs += 1
                        continue

                    if _is_same_file(node.path, dest_stat):
                        diagnostics.skip(
                            EventKind.SKIPPED_ARCHIVE, str(node.path.absolute()),
                            "Skipping archive being written"
                        )
                        continue

                    stats.processed_size += self._add_file(tar, node, entry_name)
                    stats.processed_files += 1
        except STREAM_ERRORS as e:
            raise ArchiveIOError(f"Failed to create archive {dest_archive_file}: {e}") from e

        stats.skipped = collected.paths
        stats.result_size = dest_archive_file.stat().st_size
        return stats.finish()

    def _add_file(self, tar: tarfile.TarFile, node: SourceNode, entry_name: str) -> int:
        """Write one file entry and its contents"""
        logger.debug(f"Adding file {entry_name}")

        with open(node.path, 'rb') as f:
            st = os.fstat(f.fileno())

            info = tarfile.TarInfo(name=entry_name)
            info.size = st.st_size
            info.mode = stat.S_IMODE(st.st_mode)
            info.mtime = int(st.st_mtime)

            # The codec pads the entry to a full record before returning
            tar.addfile(info, f)

        return info.size

    def _add_directory(self, tar: tarfile.TarFile, node: SourceNode, entry_name: str) -> None:
        """Write one directory entry"""
        logger.debug(f"Adding directory {entry_name}")

        st = node.path.stat()
        info = tarfile.TarInfo(name=entry_name + '/')
        info.type = tarfile.DIRTYPE
        info.mode = stat.S_IMODE(st.st_mode)
        info.mtime = int(st.st_mtime)
        tar.addfile(info)

    def extract_files(self,
                      source: Union[str, Path],
                      dest_dir: Union[str, Path]) -> OperationStats:
        """
        Extract a tar or tar.gz file into a destination directory

        Args:
            source: Archive file (.tar or *.tar.gz)
            dest_dir: Directory to extract into, created if missing

        Returns:
            Operation statistics

        Raises:
            DestinationNotDirectoryError: Destination exists and is not a directory
            SourceNotFoundError: Source is not an existing regular file
            UnsupportedFormatError: Source extension is neither tar nor tar.gz
            UnsafeEntryPathError: An entry would be written outside dest_dir
            ArchiveIOError: Reading the archive or writing a file failed
        """
        source = Path(source)
        dest_dir = Path(dest_dir)

        if dest_dir.exists() and not dest_dir.is_dir():
            raise DestinationNotDirectoryError(str(dest_dir))

        archive_format = self._check_source_archive(source)

        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArchiveIOError(f"Cannot create destination directory {dest_dir}: {e}") from e

        stats = OperationStats(
            operation_type=OperationType.EXTRACT,
            source=str(source),
            destination=str(dest_dir),
        )
        collected = CollectingDiagnostics()
        diagnostics = TeeDiagnostics(self.diagnostics, collected)
        resolver = ArchivePathResolver(dest_dir)

        try:
            with self._open_archive(source, archive_format) as tar:
                for member in tar:
                    # './' style entries name the root itself
                    if member.isdir() and not entry_parts(member.name):
                        continue

                    target = resolver.destination_path(member.name)
                    logger.debug(f"Extracting {target}")

                    if member.isdir():
                        target.mkdir(parents=True, exist_ok=True)
                        stats.processed_dirs += 1
                    elif member.isfile():
                        ensure_parent_dir(target)
                        with tar.extractfile(member) as src, open(target, 'wb') as out:
                            stats.processed_size += copy_stream(src, out, self.buffer_size)
                        stats.processed_files += 1
                    else:
                        diagnostics.skip(
                            EventKind.SKIPPED_MEMBER, member.name, "Unsupported archive member type"
                        )
        except STREAM_ERRORS as e:
            raise ArchiveIOError(f"Failed to extract archive {source}: {e}") from e

        stats.skipped = collected.paths
        stats.result_size = stats.processed_size
        return stats.finish()

    def list_contents(self, source: Union[str, Path]) -> List[Tuple[str, int, bool]]:
        """
        List archive contents without extracting

        Args:
            source: Archive file (.tar or *.tar.gz)

        Returns:
            List of (path, size, is_dir) tuples in archive order
        """
        source = Path(source)
        archive_format = self._check_source_archive(source)

        contents = []
        try:
            with self._open_archive(source, archive_format) as tar:
                for member in tar:
                    contents.append((member.name, member.size, member.isdir()))
        except STREAM_ERRORS as e:
            raise ArchiveIOError(f"Failed to read archive {source}: {e}") from e

        return contents

    @staticmethod
    def _check_source_archive(source: Path) -> ArchiveFormat:
        """Validate an archive to read and derive its format"""
        if not source.is_file():
            raise SourceNotFoundError(f"Source tar is not a file: {source}")

        archive_format = detect_archive_format(source.name)
        if archive_format == ArchiveFormat.INVALID:
            raise UnsupportedFormatError(source.name)

        return archive_format

    @contextmanager
    def _open_archive(self, source: Path, archive_format: ArchiveFormat) -> Iterator[tarfile.TarFile]:
        """Open an archive for sequential reading, decompressing if needed"""
        adapter = get_compression_adapter(archive_format)

        with ExitStack() as stack:
            raw = stack.enter_context(open(source, 'rb'))
            stream = adapter.wrap_input(raw)
            if stream is not raw:
                stack.enter_context(stream)

            with tarfile.open(fileobj=stream, mode='r|', copybufsize=self.buffer_size) as tar:
                yield tar


def _is_same_file(path: Path, other: os.stat_result) -> bool:
    try:
        st = path.stat()
    except OSError:
        return False
    return st.st_ino == other.st_ino and st.st_dev == other.st_dev
