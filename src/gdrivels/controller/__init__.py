"""Internal controller exports for gdrivels."""

from __future__ import annotations

from .drive_controller import MAX_PAGE_SIZE, GoogleDriveController

__all__ = ["GoogleDriveController", "MAX_PAGE_SIZE"]
