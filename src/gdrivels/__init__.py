"""gdrivels public API."""

from __future__ import annotations

from gdrivels.auth import AuthInfo, OAuthClient
from gdrivels.controller import GoogleDriveController
from gdrivels.errors import (
    ApiError,
    AuthError,
    FetchError,
    GDriveLsError,
    InvalidArgumentError,
    PathResolutionError,
)
from gdrivels.fetcher import list_all_files
from gdrivels.lister import FileLister
from gdrivels.models import FileRecord, ListFilesArgs
from gdrivels.pathfinder import Pathfinder
from gdrivels.query import Selection, build_query
from gdrivels.renderer import print_file_list

__all__ = [
    # High-level
    "FileLister",
    "ListFilesArgs",
    "GoogleDriveController",
    # Pipeline pieces
    "list_all_files",
    "Pathfinder",
    "print_file_list",
    "Selection",
    "build_query",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Models
    "FileRecord",
    # Errors
    "GDriveLsError",
    "InvalidArgumentError",
    "AuthError",
    "ApiError",
    "FetchError",
    "PathResolutionError",
]
