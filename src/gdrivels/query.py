"""Filter expressions for Drive file listings."""

from __future__ import annotations

from enum import IntEnum

from gdrivels.errors import InvalidArgumentError
from gdrivels.util.mime import FOLDER_MIME


class Selection(IntEnum):
    """Predefined sharing-visibility filters that override a free-form query."""

    QUERY = 0
    PUBLIC_FILES = 1
    PUBLIC = 2
    PUBLIC_STARRED_FILES = 3


SHARED_VISIBILITIES: tuple[str, ...] = (
    "anyoneCanFind",
    "anyoneWithLink",
    "domainCanFind",
    "domainWithLink",
    "limited",
)

NOT_TRASHED: str = "trashed = false"
STARRED: str = "starred = true"


def visibility_clause() -> str:
    """Match items shared through any of SHARED_VISIBILITIES."""
    terms = " or ".join(f"visibility = '{v}'" for v in SHARED_VISIBILITIES)
    return f"( {terms} )"


def not_folder_clause() -> str:
    return f"( mimeType != '{FOLDER_MIME}' )"


def public_files_query() -> str:
    """Shared, non-trashed files (folders excluded)."""
    return f"( {visibility_clause()} ) and {NOT_TRASHED} and {not_folder_clause()}"


def public_query() -> str:
    """Shared, non-trashed files and folders."""
    return f"( {visibility_clause()} and {NOT_TRASHED} ) "


def public_starred_files_query() -> str:
    """Shared, starred, non-trashed files (folders excluded)."""
    return (
        f"( {visibility_clause()} ) and {STARRED} and {NOT_TRASHED} "
        f"and {not_folder_clause()}"
    )


_SELECTION_QUERIES = {
    Selection.PUBLIC_FILES: public_files_query,
    Selection.PUBLIC: public_query,
    Selection.PUBLIC_STARRED_FILES: public_starred_files_query,
}


def to_selection(value: int) -> Selection:
    try:
        return Selection(value)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Unknown selection code: {value}",
            details={"selection": value, "allowed": [s.value for s in Selection]},
            cause=exc,
        ) from exc


def build_query(query: str, selection: int = Selection.QUERY) -> str:
    """
    Return the filter expression for one listing.

    Raises:
        InvalidArgumentError: if `selection` is not a known Selection code.
    """
    sel = to_selection(selection)
    if sel is Selection.QUERY:
        return query
    return _SELECTION_QUERIES[sel]()
