"""Public model exports for gdrivels."""

from __future__ import annotations

from .file_record import FileRecord
from .list_args import ListFilesArgs

__all__ = ["FileRecord", "ListFilesArgs"]
