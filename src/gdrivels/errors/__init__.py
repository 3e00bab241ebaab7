"""Public error exports for gdrivels."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    FetchError,
    GDriveLsError,
    HttpErrorInfo,
    InvalidArgumentError,
    PathResolutionError,
)

__all__ = [
    "GDriveLsError",
    "InvalidArgumentError",
    "AuthError",
    "ApiError",
    "FetchError",
    "PathResolutionError",
    "HttpErrorInfo",
]
