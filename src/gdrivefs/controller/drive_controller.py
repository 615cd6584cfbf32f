"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from gdrivefs.auth import AuthInfo, OAuthClient
from gdrivefs.errors import (
    ApiError,
    AuthError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from gdrivefs.models import DriveFile
from gdrivefs.util.mime import FOLDER_MIME, guess_upload_mime

from .fields import FILE_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Every call is a single blocking round-trip; failures are mapped to
          gdrivefs errors and raised immediately, never retried.
    """

    DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
    ) -> None:
        self._supports_all_drives = supports_all_drives

        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        self._service = client.build_drive_service(use_scopes, ensure_valid=True)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> DriveFile:
        req = self._service.files().get(
            fileId=file_id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_drive_file(data)

    def list_children(
        self,
        parent_id: str,
        *,
        name: Optional[str] = None,
        folders_only: bool = False,
        page_size: Optional[int] = None,
        include_trashed: bool = False,
    ) -> list[DriveFile]:
        """
        List children of parent_id in store order.

        With page_size set, only the first page is fetched and at most
        page_size items are returned; otherwise every page is followed.
        """
        q = build_children_query(
            parent_id,
            name=name,
            folders_only=folders_only,
            include_trashed=include_trashed,
        )
        logger.debug("query: %s", q)
        return self._find_by_query(q, page_size=page_size)

    def create_folder(self, name: str, parent_id: str) -> DriveFile:
        body = {"name": name, "mimeType": FOLDER_MIME, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_drive_file(data)

    def create_file(self, name: str, parent_id: str, content: bytes) -> DriveFile:
        """Create a file and upload its whole content in one (non-resumable) request."""
        try:
            from googleapiclient.http import MediaIoBaseUpload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        media = MediaIoBaseUpload(
            io.BytesIO(content),
            mimetype=guess_upload_mime(name),
            resumable=False,
        )
        body = {"name": name, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            media_body=media,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_drive_file(data)

    def rename(self, file_id: str, new_name: str) -> DriveFile:
        body = {"name": new_name}
        req = self._service.files().update(
            fileId=file_id,
            body=body,
            fields=FILE_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_drive_file(data)

    def delete(self, file_id: str) -> None:
        """Delete permanently; Drive removes a folder's descendants with it."""
        req = self._service.files().delete(
            fileId=file_id,
            **self._common_write_kwargs(),
        )
        self._execute(req.execute)

    def download(self, file_id: str) -> bytes:
        """Download the full binary content of a file into memory."""
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        req = self._service.files().get_media(
            fileId=file_id,
            **self._common_get_kwargs(),
        )

        buf = io.BytesIO()
        downloader = MediaIoBaseDownload(buf, req)
        done = False
        while not done:
            _, done = self._execute(downloader.next_chunk)
        return buf.getvalue()

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _find_by_query(self, q: str, *, page_size: Optional[int]) -> list[DriveFile]:
        all_files: list[DriveFile] = []
        page_token: Optional[str] = None

        while True:
            kwargs = self._common_list_kwargs()
            if page_size:
                kwargs["pageSize"] = page_size
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageToken=page_token,
                **kwargs,
            )
            data = self._execute(req.execute)
            for f in data.get("files", []):
                all_files.append(_file_dict_to_drive_file(f))

            if page_size:
                return all_files[:page_size]

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return all_files

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def escape_query_value(value: str) -> str:
    """Escape a string literal for the Drive `q` query language."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_children_query(
    parent_id: str,
    *,
    name: Optional[str] = None,
    folders_only: bool = False,
    include_trashed: bool = False,
) -> str:
    q = f"'{escape_query_value(parent_id)}' in parents"
    if name is not None:
        q += f" and name = '{escape_query_value(name)}'"
    if folders_only:
        q += f" and mimeType = '{FOLDER_MIME}'"
    if not include_trashed:
        q += " and trashed = false"
    return q


def _file_dict_to_drive_file(data: dict[str, Any]) -> DriveFile:
    file_id = data.get("id")
    name = data.get("name", "")
    original = data.get("originalFilename")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []
    trashed = bool(data.get("trashed", False))

    size = 0
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    modified_time = data.get("modifiedTime")
    created_time = data.get("createdTime")

    return DriveFile(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        original_filename=original if isinstance(original, str) and original else None,
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=list(parents) if isinstance(parents, list) else [],
        trashed=trashed,
        size=size,
        modified_time=modified_time if isinstance(modified_time, str) else None,
        created_time=created_time if isinstance(created_time, str) else None,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        if isinstance(payload, dict):
            err = payload.get("error", {})
            if isinstance(err, dict):
                message = err.get("message") or None
                errors = err.get("errors") or []
                if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                    details["domain"] = errors[0].get("domain")
                    details["reason_detail"] = errors[0].get("reason")
                    if isinstance(errors[0].get("reason"), str):
                        reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
