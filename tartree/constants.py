"""Global constants for tartree"""

APP_NAME = "tartree"
LOG_FORMAT = "%(message)s"

# Archive naming
TAR_EXTENSION = ".tar"
TAR_GZ_EXTENSION = ".tar.gz"
TAR_GZ_MARKER = "tar.gz"
GZIP_EXTENSION = "gz"
PLAIN_EXTENSION = "tar"
SUPPORTED_FORMATS = ("tar.gz", "tar")

# Streaming
DEFAULT_BUFFER_SIZE = 1024  # bytes per read when copying entry contents
DEFAULT_COMPRESSION_LEVEL = 6
MIN_COMPRESSION_LEVEL = 1
MAX_COMPRESSION_LEVEL = 9

# Configuration
PROJECT_CONFIG_FILE = ".tartree.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "TT001"
    SOURCE_NOT_FOUND = "TT002"
    SOURCE_NOT_DIRECTORY = "TT003"
    DESTINATION_NOT_DIRECTORY = "TT004"
    DESTINATION_EXISTS = "TT005"
    INVALID_ARCHIVE_NAME = "TT006"
    UNSUPPORTED_FORMAT = "TT007"
    UNSAFE_ENTRY_PATH = "TT008"
    ARCHIVE_IO_FAILED = "TT009"


# Environment variables
ENV_CONFIG_PATH = "TARTREE_CONFIG"
ENV_LOG_LEVEL = "TARTREE_LOG_LEVEL"
ENV_BUFFER_SIZE = "TARTREE_BUFFER_SIZE"
ENV_COMPRESSION_LEVEL = "TARTREE_COMPRESSION_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_WARNING = "⚠"

# Messages templates
MSG_CREATE_SUCCESS = f"{EMOJI_SUCCESS} Archive created: {{path}} ({{size}})"
MSG_EXTRACT_SUCCESS = f"{EMOJI_SUCCESS} Extracted {{count}} file(s) to {{path}}"
MSG_GZIP_SUCCESS = f"{EMOJI_SUCCESS} Compressed archive written: {{path}} ({{size}})"
