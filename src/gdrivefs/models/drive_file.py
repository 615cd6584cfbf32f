"""Data model for Drive items as returned by the Drive API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gdrivefs.util.mime import is_folder


@dataclass(slots=True)
class DriveFile:
    """
    A Drive item identified by its opaque file_id.

    Notes:
        - Drive allows several parents; only parents[0] is meaningful here.
        - Timestamps are kept as the raw RFC3339 strings Drive returned, so a
          malformed value surfaces when metadata is built, not when listing.
    """

    file_id: str
    name: str
    mime_type: str
    parents: list[str] = field(default_factory=list)

    original_filename: Optional[str] = None
    trashed: bool = False
    size: int = 0
    modified_time: Optional[str] = None
    created_time: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def parent_id(self) -> Optional[str]:
        return self.parents[0] if self.parents else None

    @property
    def display_name(self) -> str:
        """Name shown to file-access clients; uploads keep their original name."""
        return self.original_filename or self.name
