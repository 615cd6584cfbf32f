from .mime import (
    DEFAULT_UPLOAD_MIME,
    FOLDER_MIME,
    GOOGLE_APP_MIMES,
    is_download_disallowed,
    is_folder,
    is_google_app,
    guess_upload_mime,
)
from .paths import (
    ROOT_DISPLAY_PATH,
    ROOT_PATH,
    base_name,
    display_path,
    normalize_path,
    parent_path,
)
from .time import EPOCH, normalize_dt, parse_rfc3339

__all__ = [
    "FOLDER_MIME",
    "DEFAULT_UPLOAD_MIME",
    "GOOGLE_APP_MIMES",
    "is_folder",
    "is_google_app",
    "is_download_disallowed",
    "guess_upload_mime",
    "ROOT_PATH",
    "ROOT_DISPLAY_PATH",
    "normalize_path",
    "parent_path",
    "base_name",
    "display_path",
    "EPOCH",
    "parse_rfc3339",
    "normalize_dt",
]
