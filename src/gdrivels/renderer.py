"""Aligned table output for file listings."""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional, Sequence, TextIO

from gdrivels.models import FileRecord
from gdrivels.util.format import format_size, truncate_string
from gdrivels.util.mime import file_type
from gdrivels.util.time import format_datetime

HEADER: tuple[str, ...] = ("Id", "Name", "Type", "Size", "ModifiedTime")

COLUMN_PADDING: int = 3


class TableWriter:
    """
    Collect rows and write them with columns padded to their widest cell.

    Every column but the last is followed by at least `padding` spaces.
    Nothing is written before flush().
    """

    def __init__(self, out: TextIO, padding: int = COLUMN_PADDING) -> None:
        self._out = out
        self._padding = padding
        self._rows: list[Sequence[str]] = []

    def add_row(self, cells: Sequence[str]) -> None:
        self._rows.append(cells)

    def flush(self) -> None:
        widths: list[int] = []
        for row in self._rows:
            for i, cell in enumerate(row[:-1]):
                if i == len(widths):
                    widths.append(0)
                widths[i] = max(widths[i], len(cell))

        for row in self._rows:
            padded = [cell.ljust(widths[i] + self._padding) for i, cell in enumerate(row[:-1])]
            line = "".join(padded) + (row[-1] if row else "")
            self._out.write(line + "\n")

        self._rows = []
        self._out.flush()


def file_row(
    record: FileRecord,
    *,
    name_width: int = 0,
    size_in_bytes: bool = False,
    tz: Optional[tzinfo] = None,
) -> tuple[str, str, str, str, str]:
    return (
        record.file_id,
        truncate_string(record.name, name_width),
        file_type(record.mime_type),
        format_size(record.size, size_in_bytes),
        format_datetime(record.modified_time, tz),
    )


def print_file_list(
    out: TextIO,
    files: Iterable[FileRecord],
    *,
    name_width: int = 0,
    skip_header: bool = False,
    size_in_bytes: bool = False,
    tz: Optional[tzinfo] = None,
) -> None:
    """Write `files` as a table in the order given; `tz` defaults to local time."""
    writer = TableWriter(out)
    if not skip_header:
        writer.add_row(HEADER)

    for record in files:
        writer.add_row(
            file_row(record, name_width=name_width, size_in_bytes=size_in_bytes, tz=tz)
        )

    writer.flush()
