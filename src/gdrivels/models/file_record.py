"""Data model for listed Drive items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class FileRecord:
    """
    Metadata of a Drive file or folder as returned by a list request.

    Notes:
        - `name` is the only field changed after fetching: it is replaced by
          the absolute path when path rendering is requested.
        - `size` is None for folders and Google-apps documents.
        - `md5_checksum` is part of the listed metadata but is not rendered;
          type classification relies on `mime_type` only.
    """

    file_id: str
    name: str
    mime_type: str
    parents: list[str] = field(default_factory=list)

    md5_checksum: Optional[str] = None
    size: Optional[int] = None
    modified_time: Optional[datetime] = None
