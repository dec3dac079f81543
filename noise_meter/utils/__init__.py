"""
Utility module for the noise meter.

Display helpers used by the command line front end.
"""

from .formatting import (
    format_db,
    format_statistics,
)

__all__ = [
    "format_db",
    "format_statistics",
]
