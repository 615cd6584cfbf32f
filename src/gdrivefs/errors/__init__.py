"""Public error exports for gdrivefs."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
