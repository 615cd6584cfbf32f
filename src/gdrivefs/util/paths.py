"""Slash-separated path helpers used for Drive path resolution."""

from __future__ import annotations

import posixpath

ROOT_PATH: str = ""
ROOT_DISPLAY_PATH: str = "/"


def normalize_path(path: str) -> str:
    """
    Strip trailing slashes; the root becomes the empty string.

    A relative path is anchored at the root so that "docs" and "/docs/"
    share a cache key.
    """
    p = path.rstrip("/")
    if p and not p.startswith("/"):
        p = "/" + p
    return p


def parent_path(path: str) -> str:
    """Normalized parent of a normalized path ("" for top-level entries)."""
    return normalize_path(posixpath.dirname(normalize_path(path)))


def base_name(path: str) -> str:
    return posixpath.basename(normalize_path(path))


def display_path(path: str) -> str:
    p = normalize_path(path)
    return p if p else ROOT_DISPLAY_PATH
