"""Internal controller exports for gdrivefs."""

from __future__ import annotations

from .drive_controller import GoogleDriveController, build_children_query, escape_query_value
from .fields import ROOT_FILE_ID

__all__ = [
    "GoogleDriveController",
    "ROOT_FILE_ID",
    "build_children_query",
    "escape_query_value",
]
