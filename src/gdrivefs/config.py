"""Configuration for DriveFileSystem."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Sequence

from gdrivefs.errors import InvalidArgumentError

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)


@dataclass(slots=True, frozen=True)
class FSConfig:
    """
    DriveFileSystem settings.

    Environment variables (all optional, read by from_env):
        GDRIVEFS_LOOKUP_TTL:            Seconds a failed path lookup stays cached.
                                        Default 60.
        GDRIVEFS_SUPPORTS_ALL_DRIVES:   "1"/"true" to include shared drives (default),
                                        "0"/"false" to restrict to My Drive.
        GDRIVEFS_SCOPES:                Comma-separated OAuth scopes.
    """

    lookup_ttl_seconds: float = 60.0
    supports_all_drives: bool = True
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        if self.lookup_ttl_seconds < 0:
            raise InvalidArgumentError(
                "lookup_ttl_seconds must be >= 0",
                details={"lookup_ttl_seconds": self.lookup_ttl_seconds},
            )
        if not self.scopes:
            raise InvalidArgumentError("scopes must not be empty")

    @classmethod
    def from_env(
        cls,
        *,
        lookup_ttl_seconds: Optional[float] = None,
        supports_all_drives: Optional[bool] = None,
        scopes: Optional[Sequence[str]] = None,
    ) -> "FSConfig":
        """Build config from environment variables + explicit overrides."""
        if lookup_ttl_seconds is None:
            lookup_ttl_seconds = _env_float("GDRIVEFS_LOOKUP_TTL", 60.0)
        if supports_all_drives is None:
            supports_all_drives = _env_bool("GDRIVEFS_SUPPORTS_ALL_DRIVES", True)
        if scopes is None:
            raw = os.environ.get("GDRIVEFS_SCOPES", "").strip()
            scopes = [s.strip() for s in raw.split(",") if s.strip()] or list(DEFAULT_SCOPES)

        return cls(
            lookup_ttl_seconds=lookup_ttl_seconds,
            supports_all_drives=supports_all_drives,
            scopes=tuple(scopes),
        )


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"{name} must be a number",
            details={name: raw},
            cause=exc,
        ) from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise InvalidArgumentError(f"{name} must be a boolean", details={name: raw})
