"""Diagnostics sinks for non-fatal archive events"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class EventKind(Enum):
    """Kinds of non-fatal events"""
    SKIPPED_UNREADABLE = "skipped_unreadable"
    SKIPPED_UNSUPPORTED = "skipped_unsupported"
    SKIPPED_UNLISTABLE = "skipped_unlistable"
    SKIPPED_MEMBER = "skipped_member"
    SKIPPED_ARCHIVE = "skipped_archive"


@dataclass
class DiagnosticEvent:
    """A single skip or warning event"""
    kind: EventKind
    path: str
    message: str


class DiagnosticsSink(ABC):
    """Receives events that do not abort an operation"""

    @abstractmethod
    def emit(self, event: DiagnosticEvent) -> None:
        """Handle an event"""
        pass

    def skip(self, kind: EventKind, path: str, message: str) -> None:
        """Report a skipped node or member"""
        self.emit(DiagnosticEvent(kind=kind, path=path, message=message))


class LoggingDiagnostics(DiagnosticsSink):
    """Forwards events to a logger at WARNING level"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("tartree")

    def emit(self, event: DiagnosticEvent) -> None:
        self.logger.warning(f"{event.message}: {event.path}")


class CollectingDiagnostics(DiagnosticsSink):
    """Keeps events in memory"""

    def __init__(self):
        self.events: List[DiagnosticEvent] = []

    def emit(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    @property
    def paths(self) -> List[str]:
        return [event.path for event in self.events]

    def of_kind(self, kind: EventKind) -> List[DiagnosticEvent]:
        return [event for event in self.events if event.kind == kind]


class TeeDiagnostics(DiagnosticsSink):
    """Sends every event to several sinks"""

    def __init__(self, *sinks: DiagnosticsSink):
        self.sinks = list(sinks)

    def emit(self, event: DiagnosticEvent) -> None:
        for sink in self.sinks:
            sink.emit(event)
