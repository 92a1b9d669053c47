"""Core modules for tartree"""

from .diagnostics import (
    DiagnosticEvent,
    DiagnosticsSink,
    CollectingDiagnostics,
    LoggingDiagnostics,
    EventKind,
)
from .path_resolver import (
    ArchivePathResolver,
    relative_entry_path,
    destination_path,
)
from .tree_walker import TreeWalker, SourceNode, NodeKind
from .compression import TarProcessor

__all__ = [
    "DiagnosticEvent",
    "DiagnosticsSink",
    "CollectingDiagnostics",
    "LoggingDiagnostics",
    "EventKind",
    "ArchivePathResolver",
    "relative_entry_path",
    "destination_path",
    "TreeWalker",
    "SourceNode",
    "NodeKind",
    "TarProcessor",
]
