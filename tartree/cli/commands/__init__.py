"""CLI commands"""

from . import create
from . import extract
from . import compress
from . import listing

__all__ = [
    "create",
    "extract",
    "compress",
    "listing",
]
