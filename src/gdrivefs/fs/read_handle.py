"""Read-only file handle backed by a whole-file Drive download."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Optional

from gdrivefs.errors import InvalidStateError, UnsupportedError
from gdrivefs.models import DriveFile, FileStat
from gdrivefs.util.mime import is_download_disallowed

from .resolver import ResolvedFile

if TYPE_CHECKING:
    from .filesystem import DriveFileSystem

logger = logging.getLogger(__name__)


class ReadHandle:
    """
    Handle returned by DriveFileSystem.open_file(path, os.O_RDONLY).

    The content is downloaded in full on the first read (or end seek) and
    served from memory afterwards. Only rewinding to the start and seeking
    to the end are supported.
    """

    def __init__(self, fs: "DriveFileSystem", entry: ResolvedFile) -> None:
        self._fs = fs
        self._entry = entry
        self._content: Optional[bytes] = None
        self._reader = io.BytesIO()
        self._pos = 0
        self._closed = False

    @property
    def path(self) -> str:
        return self._entry.path

    @property
    def file(self) -> DriveFile:
        return self._entry.file

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def loaded(self) -> bool:
        return self._content is not None

    def stat(self) -> FileStat:
        return FileStat.from_drive_file(self._entry.file)

    def readdir(self, count: int = 0) -> list[FileStat]:
        """Metadata of the folder's live children, at most count (0 = all)."""
        self._check_open()
        if not self._entry.file.is_folder:
            raise UnsupportedError("readdir on a non-folder", details={"path": self.path})
        children = self._fs.list(self._entry.file, count)
        return [FileStat.from_drive_file(child) for child in children]

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes (all remaining if negative); b"" at end of file."""
        logger.debug("read %s %d", self.path, size)
        self._check_open()
        self._load()

        data = self._reader.read(size)
        self._pos += len(data)
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        logger.debug("seek %s %d %d", self.path, offset, whence)
        self._check_open()

        if offset == 0 and whence == io.SEEK_SET:
            if self._content is not None:
                self._pos = 0
                self._reader = io.BytesIO(self._content)
            return self._pos

        if offset == 0 and whence == io.SEEK_END:
            self._pos = len(self._load())
            self._reader = io.BytesIO()
            return self._pos

        raise UnsupportedError(
            "Only seek(0, SEEK_SET) and seek(0, SEEK_END) are supported",
            details={"path": self.path, "offset": offset, "whence": whence},
        )

    def tell(self) -> int:
        return self._pos

    def write(self, data: bytes) -> int:
        raise UnsupportedError("write on a read-only handle", details={"path": self.path})

    def close(self) -> None:
        self._content = None
        self._reader = io.BytesIO()
        self._closed = True

    def __enter__(self) -> "ReadHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise InvalidStateError("Handle is closed", details={"path": self.path})

    def _load(self) -> bytes:
        if self._content is not None:
            return self._content

        file = self._entry.file
        if is_download_disallowed(file.mime_type):
            raise UnsupportedError(
                "Content of this item cannot be downloaded",
                details={"path": self.path, "mime_type": file.mime_type},
            )

        content = self._fs.controller.download(file.file_id)
        logger.debug("downloaded %s (%d bytes)", self.path, len(content))
        self._content = content
        self._reader = io.BytesIO(content)
        return content
