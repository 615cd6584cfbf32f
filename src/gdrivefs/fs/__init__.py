"""Path-based file system over Drive items."""

from __future__ import annotations

from .cache import CacheEntry, LookupCache, Missing
from .filesystem import DriveFileSystem, FileHandle
from .read_handle import ReadHandle
from .resolver import PathResolver, ResolvedFile
from .write_handle import WriteHandle

__all__ = [
    "DriveFileSystem",
    "FileHandle",
    "ReadHandle",
    "WriteHandle",
    "PathResolver",
    "ResolvedFile",
    "LookupCache",
    "CacheEntry",
    "Missing",
]
