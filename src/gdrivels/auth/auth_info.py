"""Authentication settings for gdrivels (OAuth only)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gdrivels.errors import InvalidArgumentError

ENV_CLIENT_SECRETS: str = "GDRIVELS_CLIENT_SECRETS"
ENV_TOKEN_FILE: str = "GDRIVELS_TOKEN_FILE"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only OAuth is supported:
        kind = "oauth"
        data must include:
            - client_secrets_file
            - token_file
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "oauth":
            raise InvalidArgumentError("AuthInfo.kind must be 'oauth'")

        if not isinstance(self.data, dict):
            raise InvalidArgumentError("AuthInfo.data must be a dict")

        for key in ("client_secrets_file", "token_file"):
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidArgumentError(
                    f"AuthInfo.data['{key}'] must be a non-empty string"
                )

    @classmethod
    def oauth(cls, client_secrets_file: str, token_file: str) -> "AuthInfo":
        return cls(
            kind="oauth",
            data={"client_secrets_file": client_secrets_file, "token_file": token_file},
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AuthInfo":
        """Read GDRIVELS_CLIENT_SECRETS and GDRIVELS_TOKEN_FILE."""
        env = os.environ if environ is None else environ
        missing = [
            name
            for name in (ENV_CLIENT_SECRETS, ENV_TOKEN_FILE)
            if not env.get(name, "").strip()
        ]
        if missing:
            raise InvalidArgumentError(
                f"Missing env var: {', '.join(missing)}",
                details={"missing": missing},
            )
        return cls.oauth(env[ENV_CLIENT_SECRETS].strip(), env[ENV_TOKEN_FILE].strip())

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])
