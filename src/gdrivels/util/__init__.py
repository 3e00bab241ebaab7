from .format import SIZE_UNITS, TRUNCATION_MARKER, format_size, truncate_string
from .mime import FOLDER_MIME, file_type, is_binary, is_folder, is_google_app
from .time import DATETIME_FORMAT, format_datetime, parse_rfc3339

__all__ = [
    "FOLDER_MIME",
    "is_folder",
    "is_google_app",
    "is_binary",
    "file_type",
    "TRUNCATION_MARKER",
    "SIZE_UNITS",
    "truncate_string",
    "format_size",
    "DATETIME_FORMAT",
    "parse_rfc3339",
    "format_datetime",
]
