"""Public auth exports for gdrivels."""

from __future__ import annotations

from .auth_info import ENV_CLIENT_SECRETS, ENV_TOKEN_FILE, AuthInfo
from .oauth_client import DEFAULT_SCOPES, OAuthClient

__all__ = [
    "AuthInfo",
    "OAuthClient",
    "DEFAULT_SCOPES",
    "ENV_CLIENT_SECRETS",
    "ENV_TOKEN_FILE",
]
