"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from gdrivels.auth import AuthInfo, OAuthClient
from gdrivels.errors import ApiError, HttpErrorInfo, InvalidArgumentError
from gdrivels.models import FileRecord
from gdrivels.util.time import parse_rfc3339

from .fields import LIST_FIELDS, PATH_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PAGE_SIZE: int = 1000


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` is passed in explicitly and never exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Failures are raised as ApiError; nothing is retried here.
    """

    def __init__(self, service: Any, *, supports_all_drives: bool = True) -> None:
        self._service = service
        self._supports_all_drives = supports_all_drives

    @classmethod
    def from_auth_info(
        cls,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
    ) -> "GoogleDriveController":
        """Build the Drive service from OAuth settings and wrap it."""
        service = OAuthClient(auth_info).build_drive_service(scopes)
        return cls(service, supports_all_drives=supports_all_drives)

    # ----------------------------
    # Public API
    # ----------------------------
    def iter_pages(
        self,
        query: str,
        *,
        order_by: str = "",
        page_size: int = MAX_PAGE_SIZE,
        fields: str = LIST_FIELDS,
    ) -> Iterator[list[FileRecord]]:
        """
        Yield one list of records per `files().list` page.

        The next request is only issued when the caller pulls the next page,
        so a caller that has seen enough simply stops iterating.
        """
        if not 0 < page_size <= MAX_PAGE_SIZE:
            raise InvalidArgumentError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}",
                details={"page_size": page_size},
            )

        page_token: Optional[str] = None
        while True:
            params: dict[str, Any] = {
                "q": query,
                "fields": fields,
                "pageSize": page_size,
                "pageToken": page_token,
                **self._common_list_kwargs(),
            }
            if order_by:
                params["orderBy"] = order_by

            logger.debug("files.list q=%r pageSize=%d", query, page_size)
            req = self._service.files().list(**params)
            data = self._execute(req.execute)
            yield [_file_dict_to_record(f) for f in data.get("files", []) or []]

            page_token = data.get("nextPageToken")
            if not page_token:
                break

    def get(self, file_id: str, *, fields: str = PATH_FIELDS) -> FileRecord:
        req = self._service.files().get(
            fileId=file_id,
            fields=fields,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_record(data)

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

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> ApiError:
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            message = info.message or f"HTTP error {info.status_code}"
            return ApiError(message, details=info.as_details(), cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return ApiError(f"Network error: {exc}", cause=exc)

        return ApiError(f"Drive API error: {exc}", cause=exc)


def _file_dict_to_record(data: dict[str, Any]) -> FileRecord:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []

    modified_time = None
    if isinstance(data.get("modifiedTime"), str):
        try:
            modified_time = parse_rfc3339(data["modifiedTime"])
        except ValueError:
            modified_time = None

    # Drive sends int64 values as JSON strings.
    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    md5 = data.get("md5Checksum")

    return FileRecord(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=list(parents) if isinstance(parents, list) else [],
        md5_checksum=md5 if isinstance(md5, str) else None,
        size=size,
        modified_time=modified_time,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)
    message = None

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message if isinstance(message, str) else None,
    )
