"""Arguments accepted by the file listing entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from gdrivels.query import Selection


@dataclass(slots=True)
class ListFilesArgs:
    """
    Options for a single file listing.

    `max_files` <= 0 means unbounded; `name_width` == 0 disables truncation.
    A `selection` other than Selection.QUERY overrides `query`.
    """

    out: TextIO
    query: str = ""
    sort_order: str = ""
    selection: int = Selection.QUERY
    max_files: int = 0
    name_width: int = 0
    skip_header: bool = False
    size_in_bytes: bool = False
    abs_path: bool = False
