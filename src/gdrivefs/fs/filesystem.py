"""DriveFileSystem: hierarchical file access on top of Google Drive."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from gdrivefs.auth import AuthInfo
from gdrivefs.config import FSConfig
from gdrivefs.controller import GoogleDriveController
from gdrivefs.errors import AlreadyExistsError, NotFoundError, UnsupportedError
from gdrivefs.models import DriveFile, FileStat
from gdrivefs.util.paths import base_name, normalize_path, parent_path

from .cache import LookupCache
from .read_handle import ReadHandle
from .resolver import PathResolver, ResolvedFile
from .write_handle import WriteHandle

logger = logging.getLogger(__name__)

FileHandle = Union[ReadHandle, WriteHandle]

_WRITE_ACCESS = (os.O_WRONLY, os.O_RDWR)
_CREATE_TRUNCATE = os.O_CREAT | os.O_TRUNC


class DriveFileSystem:
    """
    Path-based file operations backed by Drive items.

    Every operation runs synchronously on the caller's thread. Mutations
    invalidate the exact lookup-cache entries they touch.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        config: Optional[FSConfig] = None,
    ) -> None:
        cfg = config if config is not None else FSConfig()
        controller = GoogleDriveController(
            auth_info,
            scopes=cfg.scopes,
            supports_all_drives=cfg.supports_all_drives,
        )
        self._setup(controller, cfg)

    @classmethod
    def from_controller(
        cls,
        controller,
        *,
        config: Optional[FSConfig] = None,
    ) -> "DriveFileSystem":
        """Create a filesystem with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._setup(controller, config if config is not None else FSConfig())
        return obj

    def _setup(self, controller, config: FSConfig) -> None:
        self._controller = controller
        self._config = config
        self._cache = LookupCache(
            PathResolver(controller),
            ttl_seconds=config.lookup_ttl_seconds,
        )

    @property
    def controller(self):
        return self._controller

    @property
    def config(self) -> FSConfig:
        return self._config

    # ----------------------------
    # Resolution
    # ----------------------------
    def lookup(self, path: str, only_folder: bool = False) -> ResolvedFile:
        """Resolve path through the lookup cache. Raises NotFoundError."""
        return self._cache.get(path, only_folder)

    def invalidate(self, *paths: str) -> None:
        for p in paths:
            self._cache.invalidate(p)

    # ----------------------------
    # File system operations
    # ----------------------------
    def mkdir(self, path: str, mode: int = 0o777) -> DriveFile:
        """
        Create a folder. mode is accepted for interface compatibility only.

        Raises:
            AlreadyExistsError: if path already resolves.
            NotFoundError: if the parent folder does not resolve.
        """
        logger.debug("mkdir %s %o", path, mode)
        name = normalize_path(path)
        if not name:
            raise AlreadyExistsError("Root folder already exists", details={"path": "/"})

        try:
            existing = self.lookup(name)
        except NotFoundError:
            existing = None
        if existing is not None:
            logger.debug("dir already exists: %s", existing.file.file_id)
            raise AlreadyExistsError(
                "Folder already exists",
                details={"path": name, "file_id": existing.file.file_id},
            )

        parent = parent_path(name)
        parent_entry = self.lookup(parent, only_folder=True)

        created = self._controller.create_folder(base_name(name), parent_entry.file.file_id)

        self.invalidate(name, parent)
        return created

    def open_file(self, path: str, flags: int = os.O_RDONLY, mode: int = 0o666) -> FileHandle:
        """
        Open a file.

        Supported flags:
            - os.O_RDONLY: returns a ReadHandle (the path must resolve).
            - os.O_WRONLY or os.O_RDWR, with os.O_CREAT | os.O_TRUNC:
              returns a WriteHandle; the file is created on close().

        Raises:
            UnsupportedError: for any other flag combination.
            NotFoundError: if a read-only path does not resolve.
        """
        logger.debug("open_file %s %#o %o", path, flags, mode)
        name = normalize_path(path)

        access = flags & (os.O_RDONLY | os.O_WRONLY | os.O_RDWR)
        if access in _WRITE_ACCESS:
            if flags != access | _CREATE_TRUNCATE:
                raise UnsupportedError(
                    "Only create+truncate writes are supported",
                    details={"path": name, "flags": flags},
                )
            return WriteHandle(self, name)

        if flags == os.O_RDONLY:
            return ReadHandle(self, self.lookup(name))

        raise UnsupportedError(
            "Unsupported open mode",
            details={"path": name, "flags": flags},
        )

    def remove_all(self, path: str) -> None:
        """Delete the item at path; Drive deletes a folder's contents with it."""
        logger.debug("remove_all %s", path)
        name = normalize_path(path)
        entry = self.lookup(name)

        self._controller.delete(entry.file.file_id)

        self.invalidate(name, parent_path(name))

    def rename(self, old_path: str, new_path: str) -> DriveFile:
        """
        Rename an item within its folder.

        Only the display name changes; Drive parents are left alone, so a
        destination in another folder is rejected.

        Raises:
            UnsupportedError: if new_path is in a different folder.
            NotFoundError: if old_path does not resolve.
        """
        logger.debug("rename %s -> %s", old_path, new_path)
        old = normalize_path(old_path)
        new = normalize_path(new_path)
        if not old or not new:
            raise UnsupportedError("Cannot rename the root folder")
        if parent_path(old) != parent_path(new):
            raise UnsupportedError(
                "Moving between folders is not supported",
                details={"old_path": old, "new_path": new},
            )

        entry = self.lookup(old)
        renamed = self._controller.rename(entry.file.file_id, base_name(new))

        self.invalidate(old, new, parent_path(old))
        return renamed

    def stat(self, path: str) -> FileStat:
        """
        Return metadata for path.

        Raises:
            NotFoundError: if path does not resolve.
            InvalidTimestampError: if Drive returned a garbled timestamp.
        """
        logger.debug("stat %s", path)
        entry = self.lookup(path)
        return FileStat.from_drive_file(entry.file)

    def list(self, parent: DriveFile, limit: int = 0) -> list[DriveFile]:
        """Live children of parent in Drive order, at most limit (0 = all)."""
        children = self._controller.list_children(
            parent.file_id,
            page_size=limit or None,
        )
        return [child for child in children if not child.trashed]

    def readdir(self, handle: FileHandle, limit: int = 0) -> list[FileStat]:
        return handle.readdir(limit)
