"""Command line interface for tartree"""

from .main import cli, main

__all__ = ["cli", "main"]
