"""Archiver API for archive operations"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from ..core.compression import TarProcessor, gzip_tar_file as _gzip_tar_file
from ..core.diagnostics import DiagnosticsSink, LoggingDiagnostics
from ..core.tree_walker import can_read
from ..models.config import ArchiveConfig
from ..models.result import OperationStats, OperationType

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Archiver:
    """Archiver class for directory archiving operations"""

    def __init__(self,
                 config: Optional[ArchiveConfig] = None,
                 diagnostics: Optional[DiagnosticsSink] = None,
                 access_check: Callable[[Path], bool] = can_read):
        """
        Initialize archiver

        Args:
            config: Archive settings (defaults apply when omitted)
            diagnostics: Sink for skipped files and members
            access_check: Readability predicate used while walking trees
        """
        self.config = config or ArchiveConfig()
        self.diagnostics = diagnostics or LoggingDiagnostics(logger)
        self.processor = TarProcessor(
            diagnostics=self.diagnostics,
            buffer_size=self.config.buffer_size,
            access_check=access_check,
        )

    def create_directory_tar(self,
                             source_dir: PathLike,
                             dest_archive_file: PathLike,
                             include_directories: Optional[bool] = None) -> OperationStats:
        """
        Archive a directory into a .tar file

        Args:
            source_dir: Directory to archive (the directory itself is not an entry)
            dest_archive_file: Archive to create, must end with .tar
            include_directories: Write directory entries; defaults to the config value

        Returns:
            OperationStats: Statistics of the written archive
        """
        if include_directories is None:
            include_directories = self.config.include_directories

        stats = self.processor.create_directory_tar(
            source_dir, dest_archive_file, include_directories=include_directories
        )
        logger.info(
            f"Archived {stats.processed_files} file(s) from {source_dir} into {dest_archive_file}"
        )
        return stats

    def extract_files(self, source: PathLike, dest_dir: PathLike) -> OperationStats:
        """
        Extract a .tar or .tar.gz file

        Args:
            source: Archive to read
            dest_dir: Destination directory, created if missing

        Returns:
            OperationStats: Statistics of the extraction
        """
        stats = self.processor.extract_files(source, dest_dir)
        logger.info(f"Extracted {stats.processed_files} file(s) from {source} into {dest_dir}")
        return stats

    def gzip_tar_file(self, source_tar: PathLike, dest_tar_gz: PathLike) -> OperationStats:
        """
        Compress an existing .tar file into a new .tar.gz file

        Args:
            source_tar: Plain archive to compress
            dest_tar_gz: Compressed archive to create, must not exist

        Returns:
            OperationStats: Statistics of the compression
        """
        stats = OperationStats(
            operation_type=OperationType.GZIP,
            source=str(source_tar),
            destination=str(dest_tar_gz),
        )
        stats.processed_size = _gzip_tar_file(
            source_tar,
            dest_tar_gz,
            level=self.config.compression_level,
            buffer_size=self.config.buffer_size,
        )
        stats.processed_files = 1
        stats.result_size = Path(dest_tar_gz).stat().st_size
        logger.info(f"Compressed {source_tar} into {dest_tar_gz}")
        return stats.finish()

    def list_contents(self, source: PathLike) -> List[Tuple[str, int, bool]]:
        """
        List archive contents

        Args:
            source: Archive to read

        Returns:
            List of (path, size, is_dir) tuples
        """
        return self.processor.list_contents(source)


# Convenience functions
def create_directory_tar(source_dir: PathLike,
                         dest_archive_file: PathLike,
                         **options) -> OperationStats:
    """
    Archive a directory into a .tar file (convenience function)

    Args:
        source_dir: Directory to archive
        dest_archive_file: Archive to create
        **options: Options
            - include_directories: Write directory entries
            - diagnostics: Sink for skipped files

    Returns:
        OperationStats: Statistics of the written archive
    """
    archiver = Archiver(diagnostics=options.get('diagnostics'))
    return archiver.create_directory_tar(
        source_dir,
        dest_archive_file,
        include_directories=options.get('include_directories', False),
    )


def extract_files(source: PathLike, dest_dir: PathLike, **options) -> OperationStats:
    """
    Extract a .tar or .tar.gz file (convenience function)

    Args:
        source: Archive to read
        dest_dir: Destination directory
        **options: Options
            - diagnostics: Sink for skipped members

    Returns:
        OperationStats: Statistics of the extraction
    """
    archiver = Archiver(diagnostics=options.get('diagnostics'))
    return archiver.extract_files(source, dest_dir)


def gzip_tar_file(source_tar: PathLike, dest_tar_gz: PathLike, **options) -> OperationStats:
    """
    Gzip an existing .tar file (convenience function)

    Args:
        source_tar: Plain archive to compress
        dest_tar_gz: Compressed archive to create
        **options: Options
            - level: Compression level (1-9)

    Returns:
        OperationStats: Statistics of the compression
    """
    config = ArchiveConfig(compression_level=options.get('level', ArchiveConfig.compression_level))
    archiver = Archiver(config=config)
    return archiver.gzip_tar_file(source_tar, dest_tar_gz)
