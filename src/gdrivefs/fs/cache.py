"""Short-lived, thread-safe cache of path lookup outcomes."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from gdrivefs.errors import NotFoundError
from gdrivefs.util.paths import normalize_path

from .resolver import PathResolver, ResolvedFile

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS: float = 60.0


@dataclass(slots=True, frozen=True)
class Missing:
    message: str
    details: dict[str, Any]

    def to_error(self) -> NotFoundError:
        return NotFoundError(self.message, details=dict(self.details))


@dataclass(slots=True, frozen=True)
class CacheEntry:
    outcome: Missing
    expires_at: float


class LookupCache:
    """
    Negative lookup cache in front of a PathResolver.

    Only failed lookups are remembered, for ttl_seconds. Successful lookups
    always go back to Drive, so items created or changed by other clients
    show up immediately. Entries are keyed by normalized path alone; the
    only_folder flag of the first lookup decides the cached outcome.

    Invalidation is exact: invalidating a folder does not touch entries for
    paths below it.
    """

    def __init__(
        self,
        resolver: PathResolver,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._resolver = resolver
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, path: str, only_folder: bool = False) -> ResolvedFile:
        """
        Resolve path, serving a cached NotFoundError while it is fresh.

        Raises:
            NotFoundError: if the path does not resolve (cached or not).
        """
        key = normalize_path(path)

        outcome = self._cached(key)
        if outcome is None:
            return self._resolve(key, only_folder)

        logger.debug("reusing cached lookup: %r", key)
        raise outcome.to_error()

    def invalidate(self, path: str) -> None:
        key = normalize_path(path)
        logger.debug("invalidate %r", key)
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for e in self._entries.values() if e.expires_at > now)

    def _cached(self, key: str) -> Optional[Missing]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= now:
                del self._entries[key]
                return None
            return entry.outcome

    def _resolve(self, key: str, only_folder: bool) -> ResolvedFile:
        # Resolution runs outside the lock; it performs network calls and
        # re-enters get() for the parent folder.
        try:
            entry = self._resolver.resolve(key, only_folder, lookup=self.get)
        except NotFoundError as exc:
            outcome = Missing(str(exc), dict(exc.details))
            with self._lock:
                self._entries[key] = CacheEntry(
                    outcome=outcome,
                    expires_at=self._clock() + self._ttl_seconds,
                )
            raise
        return entry
