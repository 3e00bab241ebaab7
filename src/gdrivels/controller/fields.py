"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "md5Checksum,"
    "mimeType,"
    "size,"
    "modifiedTime,"
    "parents"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

# Ancestor lookups for absolute path resolution only need the tree links.
PATH_FIELDS: str = "id,name,parents"
