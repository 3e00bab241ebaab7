"""OAuth credentials and Drive service construction."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, Sequence

from gdrivels.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

# Listing and path lookups only read metadata.
DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)


class OAuthClient:
    """Load, refresh or obtain OAuth credentials and build the Drive service."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def get_credentials(self, scopes: Optional[Sequence[str]] = None):
        """
        Return valid OAuth credentials.

        A stored token is reused (and refreshed when expired); otherwise the
        installed-app flow runs and the new token is saved.

        Raises:
            AuthError: on load/refresh/flow failures.
            InvalidArgumentError: if scopes is invalid.
        """
        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        if not use_scopes or not all(isinstance(s, str) and s.strip() for s in use_scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials
        from google_auth_oauthlib.flow import InstalledAppFlow

        token_file = self._auth_info.token_file
        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(token_file, scopes=use_scopes)
            except Exception as exc:
                raise AuthError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not creds.valid and creds.refresh_token:
                logger.debug("Refreshing OAuth token from %s", token_file)
                try:
                    creds.refresh(Request())
                except Exception as exc:
                    raise AuthError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": token_file},
                        cause=exc,
                    ) from exc
                self._save_credentials(creds)

            if creds.valid:
                return creds

        client_secrets = self._auth_info.client_secrets_file
        logger.info("Starting OAuth authorization flow")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=use_scopes)
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc
        self._save_credentials(creds)
        return creds

    def build_drive_service(self, scopes: Optional[Sequence[str]] = None) -> Any:
        """Build a Drive v3 `googleapiclient.discovery.Resource`."""
        from googleapiclient.discovery import build

        creds = self.get_credentials(scopes)
        try:
            return build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        try:
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
