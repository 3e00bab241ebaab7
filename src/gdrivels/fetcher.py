"""Paginated file listing with an optional result cap."""

from __future__ import annotations

import logging

from gdrivels.controller import MAX_PAGE_SIZE, GoogleDriveController
from gdrivels.errors import ApiError, FetchError
from gdrivels.models import FileRecord
from gdrivels.query import Selection, build_query

logger = logging.getLogger(__name__)


def page_size_for(max_files: int) -> int:
    """Use the cap as page size when it fits in one page, else the API maximum."""
    if 0 < max_files < MAX_PAGE_SIZE:
        return max_files
    return MAX_PAGE_SIZE


def list_all_files(
    controller: GoogleDriveController,
    *,
    query: str = "",
    sort_order: str = "",
    selection: int = Selection.QUERY,
    max_files: int = 0,
) -> list[FileRecord]:
    """
    Fetch pages until `max_files` records are collected or results run out.

    `max_files` <= 0 means unbounded. The result never exceeds `max_files`
    even when the last page overshoots it.

    Raises:
        InvalidArgumentError: if `selection` is not a known code.
        FetchError: if any list request fails.
    """
    q = build_query(query, selection)
    files: list[FileRecord] = []

    pages = controller.iter_pages(
        q,
        order_by=sort_order,
        page_size=page_size_for(max_files),
    )
    try:
        for page in pages:
            files.extend(page)
            if max_files > 0 and len(files) >= max_files:
                logger.debug("Collected %d files, stopping at cap %d", len(files), max_files)
                break
    except ApiError as exc:
        raise FetchError(
            f"Failed to list files: {exc}",
            details=dict(exc.details),
            cause=exc,
        ) from exc

    if max_files > 0:
        return files[:max_files]
    return files
