"""Absolute path resolution through the parent chain."""

from __future__ import annotations

import logging

from gdrivels.controller import GoogleDriveController
from gdrivels.errors import ApiError, PathResolutionError
from gdrivels.models import FileRecord

logger = logging.getLogger(__name__)


class Pathfinder:
    """
    Resolve absolute paths of Drive items.

    Ancestors are looked up by id and cached for the lifetime of the
    instance, so one pathfinder should serve a single listing.
    """

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller
        self._cache: dict[str, FileRecord] = {}

    def abs_path(self, record: FileRecord) -> str:
        """
        Return `record`'s path from the drive root, e.g. "docs/2024/report.pdf".

        Only the first parent is followed. The root folder itself is not part
        of the path; items without parents resolve to their bare name.

        Raises:
            PathResolutionError: if an ancestor cannot be fetched.
        """
        segments: list[str] = []
        current = record
        seen: set[str] = set()

        while current.parents:
            parent_id = current.parents[0]
            if parent_id in seen:
                raise PathResolutionError(
                    f"Cycle in parents of {record.file_id}",
                    details={"file_id": record.file_id, "parent_id": parent_id},
                )
            seen.add(parent_id)

            parent = self._get_parent(parent_id, record)
            if not parent.parents:
                break
            segments.append(parent.name)
            current = parent

        segments.reverse()
        segments.append(record.name)
        return "/".join(segments)

    def _get_parent(self, parent_id: str, record: FileRecord) -> FileRecord:
        cached = self._cache.get(parent_id)
        if cached is not None:
            logger.debug("Parent cache hit: %s", parent_id)
            return cached

        try:
            parent = self._controller.get(parent_id)
        except ApiError as exc:
            raise PathResolutionError(
                f"Failed to resolve path of {record.file_id}: {exc}",
                details={"file_id": record.file_id, "parent_id": parent_id, **exc.details},
                cause=exc,
            ) from exc

        self._cache[parent_id] = parent
        return parent
