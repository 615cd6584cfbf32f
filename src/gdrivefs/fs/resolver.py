"""Path -> Drive item resolution by walking parent links from the root."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from gdrivefs.controller import ROOT_FILE_ID
from gdrivefs.errors import NotFoundError
from gdrivefs.models import DriveFile
from gdrivefs.util.paths import (
    ROOT_PATH,
    base_name,
    display_path,
    normalize_path,
    parent_path,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ResolvedFile:
    """A Drive item together with the path it was resolved from ("/" for root)."""

    path: str
    file: DriveFile


Lookup = Callable[[str, bool], ResolvedFile]


class PathResolver:
    """
    Resolve slash-separated paths into Drive items.

    Drive has no paths: each item only knows its parent ids, and names are
    not unique under a parent. A path is resolved by resolving its parent
    folder first and then querying that folder's children by name. When a
    folder holds several live items with the same name, the first one in
    the order Drive returns them wins.
    """

    def __init__(self, controller) -> None:
        self._controller = controller

    def resolve(
        self,
        path: str,
        only_folder: bool = False,
        *,
        lookup: Optional[Lookup] = None,
    ) -> ResolvedFile:
        """
        Resolve path to a live (non-trashed) Drive item.

        Args:
            path: Slash-separated path; "" or "/" is the root.
            only_folder: Only accept folders for the last path component.
            lookup: Used to resolve the parent folder (e.g. a LookupCache.get).
                Defaults to resolving recursively without caching.

        Raises:
            NotFoundError: if any component along the path is missing.
        """
        p = normalize_path(path)
        logger.debug("resolve %r only_folder=%s", p, only_folder)

        if p == ROOT_PATH:
            root = self._controller.get(ROOT_FILE_ID)
            return ResolvedFile(path=display_path(p), file=root)

        parent = parent_path(p)
        name = base_name(p)

        parent_lookup = lookup if lookup is not None else self.resolve
        try:
            parent_entry = parent_lookup(parent, True)
        except NotFoundError:
            logger.debug("can't locate parent %r of %r", parent, p)
            raise

        candidates = self._controller.list_children(
            parent_entry.file.file_id,
            name=name,
            folders_only=only_folder,
        )
        for candidate in candidates:
            if candidate.trashed:
                continue
            return ResolvedFile(path=p, file=candidate)

        raise NotFoundError(
            "File not found",
            details={"path": p, "only_folder": only_folder},
        )
