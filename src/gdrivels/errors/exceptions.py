"""Exception hierarchy for gdrivels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveLsError(Exception):
    """
    Base exception for gdrivels.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(GDriveLsError):
    """Raised when listing arguments are invalid (e.g., unknown selection code)."""


class AuthError(GDriveLsError):
    """Raised when OAuth credentials cannot be loaded, refreshed or obtained."""


class ApiError(GDriveLsError):
    """Raised by the controller when a Drive API call fails."""


class FetchError(GDriveLsError):
    """Raised when the paginated file listing fails."""


class PathResolutionError(GDriveLsError):
    """Raised when an absolute path cannot be resolved for a file."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information extracted from a client error."""

    status_code: int
    reason: str | None = None
    message: str | None = None

    def as_details(self) -> dict[str, Any]:
        return {"status_code": self.status_code, "reason": self.reason}
