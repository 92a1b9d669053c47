"""Configuration data models"""

from dataclasses import dataclass
from typing import Any, Dict

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    MAX_COMPRESSION_LEVEL,
    MIN_COMPRESSION_LEVEL,
)


@dataclass
class ArchiveConfig:
    """Archive operation settings"""
    buffer_size: int = DEFAULT_BUFFER_SIZE
    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    include_directories: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError on out-of-range values"""
        if not isinstance(self.buffer_size, int) or self.buffer_size <= 0:
            raise ConfigError(f"buffer_size must be a positive integer, got {self.buffer_size!r}")

        if (not isinstance(self.compression_level, int)
                or not MIN_COMPRESSION_LEVEL <= self.compression_level <= MAX_COMPRESSION_LEVEL):
            raise ConfigError(
                f"compression_level must be between {MIN_COMPRESSION_LEVEL} and "
                f"{MAX_COMPRESSION_LEVEL}, got {self.compression_level!r}"
            )

        if not isinstance(self.include_directories, bool):
            raise ConfigError("include_directories must be true or false")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArchiveConfig":
        """Create from dictionary, ignoring unknown keys"""
        known = {
            key: data[key]
            for key in ("buffer_size", "compression_level", "include_directories", "log_level")
            if key in data
        }
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "buffer_size": self.buffer_size,
            "compression_level": self.compression_level,
            "include_directories": self.include_directories,
            "log_level": self.log_level,
        }
