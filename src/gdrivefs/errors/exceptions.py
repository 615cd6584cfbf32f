"""Exception hierarchy and HTTP error mapping for gdrivefs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveFSError(Exception):
    """
    Base exception for gdrivefs.

    Attributes:
        details: Optional structured information (e.g., path, HTTP status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class NotFoundError(GDriveFSError):
    """Raised when a path does not resolve or a Drive resource is gone (HTTP 404)."""


class AlreadyExistsError(GDriveFSError):
    """Raised when mkdir or a write-close target is already occupied."""


class UnsupportedError(GDriveFSError):
    """Raised for open modes, seeks and handle operations the adapter does not implement."""


class InvalidStateError(GDriveFSError):
    """Raised when a handle is used in an invalid state (e.g., after close)."""


class InvalidTimestampError(GDriveFSError):
    """Raised when a Drive timestamp cannot be parsed as RFC3339."""


class AuthError(GDriveFSError):
    """Raised when OAuth authentication/refresh fails."""


class PermissionError(GDriveFSError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(GDriveFSError):
    """Raised when arguments or configuration values are invalid (HTTP 400, etc.)."""


class ConflictError(GDriveFSError):
    """Raised when Drive reports a conflict (HTTP 409/412)."""


class RateLimitError(GDriveFSError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(GDriveFSError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(GDriveFSError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(GDriveFSError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdrivefs exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveFSError:
    """
    Map an HTTP error to a gdrivefs exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related,
          or RateLimitError for (user)rateLimitExceeded
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> ApiError

    The mapped error is informational only; nothing in gdrivefs retries.
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if info.reason in ("rateLimitExceeded", "userRateLimitExceeded"):
            return RateLimitError(message, details=details, cause=cause)
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
