"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class OperationType(Enum):
    """Operation type"""
    CREATE = "create"
    EXTRACT = "extract"
    GZIP = "gzip"


@dataclass
class OperationStats:
    """Statistics of a completed archive operation"""
    operation_type: OperationType
    source: str = ""
    destination: str = ""
    processed_files: int = 0
    processed_dirs: int = 0
    processed_size: int = 0
    result_size: int = 0
    skipped: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def duration(self) -> float:
        """Elapsed seconds, zero while the operation is running"""
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    def finish(self) -> "OperationStats":
        self.end_time = datetime.now()
        return self
