"""Exception definitions for tartree API"""

from ..constants import ErrorCode, SUPPORTED_FORMATS


class TarTreeError(Exception):
    """Base exception for tartree"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ValidationError(TarTreeError):
    """Precondition violation detected before any stream is opened"""
    pass


class InvalidArchiveNameError(ValidationError):
    """Archive file name does not carry the expected extension"""

    def __init__(self, file_name: str, expected: str):
        message = f"Archive file name must end with {expected}: {file_name}"
        super().__init__(message, ErrorCode.INVALID_ARCHIVE_NAME)
        self.file_name = file_name
        self.expected = expected


class UnsupportedFormatError(ValidationError):
    """Archive format cannot be derived from the file name"""

    def __init__(self, file_name: str):
        message = (
            f"Invalid file extension for {file_name}. "
            f"Supported: {', '.join(SUPPORTED_FORMATS)}"
        )
        super().__init__(message, ErrorCode.UNSUPPORTED_FORMAT)
        self.file_name = file_name


class SourceNotFoundError(ValidationError):
    """Source path missing or not of the required kind"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SOURCE_NOT_FOUND)


class SourceNotDirectoryError(ValidationError):
    """Source exists but is not a directory"""

    def __init__(self, source: str):
        message = f"Source directory is not a directory: {source}"
        super().__init__(message, ErrorCode.SOURCE_NOT_DIRECTORY)
        self.source = source


class DestinationNotDirectoryError(ValidationError):
    """Extraction destination exists and is not a directory"""

    def __init__(self, destination: str):
        message = f"Destination is not a directory: {destination}"
        super().__init__(message, ErrorCode.DESTINATION_NOT_DIRECTORY)
        self.destination = destination


class DestinationExistsError(ValidationError):
    """Destination file already exists"""

    def __init__(self, destination: str):
        message = f"Destination file already exists: {destination}"
        super().__init__(message, ErrorCode.DESTINATION_EXISTS)
        self.destination = destination


class PathError(TarTreeError):
    """Path related error"""
    pass


class UnsafeEntryPathError(PathError):
    """Archive entry would be written outside the extraction root"""

    def __init__(self, entry_path: str, reason: str = "escapes the destination directory"):
        message = f"Unsafe archive entry path {entry_path!r}: {reason}"
        super().__init__(message, ErrorCode.UNSAFE_ENTRY_PATH)
        self.entry_path = entry_path


class ArchiveIOError(TarTreeError):
    """Read or write failure while streaming archive contents"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.ARCHIVE_IO_FAILED)


class ConfigError(TarTreeError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)
