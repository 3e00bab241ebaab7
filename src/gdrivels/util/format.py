"""Cell formatting helpers for the file table."""

from __future__ import annotations

from typing import Optional

TRUNCATION_MARKER: str = "..."

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def truncate_string(value: str, max_width: int) -> str:
    """
    Shorten `value` to at most `max_width` characters.

    Long values keep their head and tail around TRUNCATION_MARKER, the head
    getting the smaller half. Widths too small for the marker simply cut the
    value. A width of 0 (or less) disables truncation.
    """
    if max_width <= 0 or len(value) <= max_width:
        return value

    if max_width <= len(TRUNCATION_MARKER):
        return value[:max_width]

    keep = max_width - len(TRUNCATION_MARKER)
    keep_head = keep // 2
    keep_tail = keep - keep_head
    return f"{value[:keep_head]}{TRUNCATION_MARKER}{value[len(value) - keep_tail:]}"


def format_size(size: Optional[int], in_bytes: bool = False) -> str:
    """Render a byte count as '<n> B' or with a decimal (1000-based) unit."""
    if not size:
        return ""
    if in_bytes:
        return f"{size} B"

    value = float(size)
    unit = 0
    while value > 1000 and unit < len(SIZE_UNITS) - 1:
        value /= 1000
        unit += 1
    return f"{value:.1f} {SIZE_UNITS[unit]}"
