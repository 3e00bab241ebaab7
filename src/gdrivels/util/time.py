from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    if dt.tzinfo is None:
        raise ValueError("RFC3339 value must carry a UTC offset")
    return dt.astimezone(timezone.utc)


def format_datetime(dt: Optional[datetime], tz: Optional[tzinfo] = None) -> str:
    """
    Render a timestamp as 'YYYY-MM-DD HH:MM:SS'.

    The value is converted to `tz`, or to the local timezone when `tz` is None.
    Missing timestamps render as an empty string.
    """
    if dt is None:
        return ""
    return dt.astimezone(tz).strftime(DATETIME_FORMAT)
