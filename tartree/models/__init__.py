"""Data models for tartree"""

from .config import ArchiveConfig
from .result import OperationStats, OperationType

__all__ = [
    "ArchiveConfig",
    "OperationStats",
    "OperationType",
]
