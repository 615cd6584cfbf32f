"""Generic file metadata returned by stat/readdir."""

from __future__ import annotations

import stat as stat_mod
from dataclasses import dataclass
from datetime import datetime

from gdrivefs.errors import InvalidTimestampError
from gdrivefs.util.time import EPOCH, parse_rfc3339

from .drive_file import DriveFile

DIR_MODE: int = stat_mod.S_IFDIR | 0o755
FILE_MODE: int = stat_mod.S_IFREG | 0o644


@dataclass(slots=True, frozen=True)
class FileStat:
    name: str
    size: int
    is_dir: bool
    mod_time: datetime = EPOCH

    @property
    def mode(self) -> int:
        return DIR_MODE if self.is_dir else FILE_MODE

    @classmethod
    def from_drive_file(cls, file: DriveFile) -> "FileStat":
        """
        Build metadata from a Drive item.

        Raises:
            InvalidTimestampError: if the modification/creation time is garbled.
        """
        return cls(
            name=file.display_name,
            size=file.size,
            is_dir=file.is_folder,
            mod_time=modification_time(file),
        )


def modification_time(file: DriveFile) -> datetime:
    """modifiedTime, else createdTime, else the Unix epoch."""
    raw = file.modified_time or file.created_time
    if not raw:
        return EPOCH

    try:
        return parse_rfc3339(raw)
    except ValueError as exc:
        raise InvalidTimestampError(
            "Unparsable Drive timestamp",
            details={"file_id": file.file_id, "value": raw},
            cause=exc,
        ) from exc
