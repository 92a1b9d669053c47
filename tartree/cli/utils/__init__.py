"""CLI utility functions"""

from .output import (
    console,
    format_stats,
    format_contents,
    print_error,
    print_warning,
)

__all__ = [
    'console',
    'format_stats',
    'format_contents',
    'print_error',
    'print_warning',
]
