"""Public model exports for gdrivefs."""

from __future__ import annotations

from .drive_file import DriveFile
from .file_stat import FileStat, modification_time

__all__ = [
    "DriveFile",
    "FileStat",
    "modification_time",
]
