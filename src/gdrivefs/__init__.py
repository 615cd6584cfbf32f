"""gdrivefs public API."""

from __future__ import annotations

from gdrivefs.auth import AuthInfo, OAuthClient
from gdrivefs.config import FSConfig
from gdrivefs.errors import (
    AlreadyExistsError,
    ApiError,
    AuthError,
    ConflictError,
    GDriveFSError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    InvalidTimestampError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    UnsupportedError,
    map_http_error,
)
from gdrivefs.fs import DriveFileSystem, LookupCache, PathResolver, ReadHandle, WriteHandle
from gdrivefs.models import DriveFile, FileStat

__all__ = [
    # High-level
    "DriveFileSystem",
    "FSConfig",
    "ReadHandle",
    "WriteHandle",
    "PathResolver",
    "LookupCache",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Models
    "DriveFile",
    "FileStat",
    # Errors
    "GDriveFSError",
    "NotFoundError",
    "AlreadyExistsError",
    "UnsupportedError",
    "InvalidStateError",
    "InvalidTimestampError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
