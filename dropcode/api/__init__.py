"""
Public API surface for the dropcode CLI.
Import from here to keep the entry point clean.
"""

from .files import FileMetadata, fetch_file_info
from .helpers import err, ok, info

__all__ = [
    'FileMetadata', 'fetch_file_info',
    'err', 'ok', 'info',
]
