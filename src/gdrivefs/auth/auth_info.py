"""Authentication information for gdrivefs (OAuth only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only OAuth is supported:
        kind = "oauth"
        data must include:
            - token_file
        and either:
            - client_secrets_file
        or both of:
            - client_id
            - client_secret
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "oauth":
            raise ValueError("AuthInfo.kind must be 'oauth'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        _require_str(self.data, "token_file")

        if "client_secrets_file" in self.data:
            _require_str(self.data, "client_secrets_file")
            return

        for key in ("client_id", "client_secret"):
            _require_str(self.data, key)

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])

    @property
    def client_secrets_file(self) -> Optional[str]:
        """Path to OAuth client secrets JSON, if configured that way."""
        value = self.data.get("client_secrets_file")
        return str(value) if value else None

    def client_config(self) -> dict[str, Any]:
        """Installed-app client config built from an inline client_id/secret."""
        return {
            "installed": {
                "client_id": str(self.data["client_id"]),
                "client_secret": str(self.data["client_secret"]),
                "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                "token_uri": "https://oauth2.googleapis.com/token",
                "redirect_uris": ["http://localhost"],
            }
        }


def _require_str(data: dict[str, Any], key: str) -> None:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")
