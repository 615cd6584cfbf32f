"""Write-only file handle that uploads its buffer as a new Drive file on close."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from gdrivefs.errors import AlreadyExistsError, InvalidStateError, NotFoundError, UnsupportedError
from gdrivefs.models import FileStat
from gdrivefs.util.paths import base_name, normalize_path, parent_path

if TYPE_CHECKING:
    from .filesystem import DriveFileSystem

logger = logging.getLogger(__name__)


class WriteHandle:
    """
    Handle returned by DriveFileSystem.open_file for create+truncate writes.

    Bytes accumulate in memory; nothing exists on Drive until close()
    succeeds. Existing files are never overwritten. A failed close keeps the
    buffer, so close() may simply be called again.
    """

    def __init__(self, fs: "DriveFileSystem", path: str) -> None:
        self._fs = fs
        self._path = normalize_path(path)
        self._buffer = io.BytesIO()
        self._size = 0
        self._closed = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def size(self) -> int:
        return self._size

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes) -> int:
        self._check_open()
        n = self._buffer.write(data)
        self._size += n
        return n

    def stat(self) -> FileStat:
        return FileStat(name=base_name(self._path), size=self._size, is_dir=False)

    def read(self, size: int = -1) -> bytes:
        raise UnsupportedError("read on a write-only handle", details={"path": self._path})

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        raise UnsupportedError("seek on a write-only handle", details={"path": self._path})

    def readdir(self, count: int = 0) -> list[FileStat]:
        raise UnsupportedError("readdir on a write-only handle", details={"path": self._path})

    def close(self) -> None:
        """
        Create the file on Drive with everything written so far.

        Raises:
            AlreadyExistsError: if the path already resolves.
            NotFoundError: if the parent folder does not resolve.
            InvalidStateError: if the handle was already closed.
        """
        logger.debug("close %s", self._path)
        self._check_open()

        fs = self._fs
        try:
            existing = fs.lookup(self._path)
        except NotFoundError:
            existing = None
        if existing is not None:
            raise AlreadyExistsError(
                "File already exists",
                details={"path": self._path, "file_id": existing.file.file_id},
            )

        parent = parent_path(self._path)
        try:
            parent_entry = fs.lookup(parent, only_folder=True)
        except NotFoundError as exc:
            raise NotFoundError(
                "parent not found",
                details={"path": self._path, "parent": parent},
                cause=exc,
            ) from exc

        fs.controller.create_file(
            base_name(self._path),
            parent_entry.file.file_id,
            self._buffer.getvalue(),
        )

        fs.invalidate(self._path, parent)
        self._buffer = io.BytesIO()
        self._closed = True
        logger.debug("close successful %s (%d bytes)", self._path, self._size)

    def __enter__(self) -> "WriteHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise InvalidStateError("Handle is closed", details={"path": self._path})
