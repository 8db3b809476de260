"""Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the student id, a role and an expiry. There
is no revocation: a token stays valid until it expires.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import jwt

from campusconnect.auth.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from campusconnect.config import TokenConfig

ROLE_STUDENT = "student"


@dataclass(frozen=True)
class TokenClaims:
    """Decoded identity carried by a valid token."""

    identity: str
    role: str


class TokenIssuer:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, config: TokenConfig) -> None:
        """Initialize the issuer.

        Args:
            config: Secret, lifetime and algorithm used for every token.
        """
        if not config.secret:
            raise ValueError("Token secret must not be empty")
        self._config = config

    @property
    def config(self) -> TokenConfig:
        """The signing configuration."""
        return self._config

    def issue(self, identity: str, role: str = ROLE_STUDENT) -> str:
        """Issue a token for an identity.

        Args:
            identity: The student's unique ID.
            role: Role name embedded in the token.

        Returns:
            Encoded JWT that expires `config.ttl` after issuance.
        """
        now = datetime.now(UTC)
        payload = {
            "id": identity,
            "role": role,
            "iat": now,
            "exp": now + self._config.ttl,
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Args:
            token: The encoded JWT.

        Returns:
            The identity and role the token was issued for.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                expired, or missing claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

        identity = payload.get("id")
        role = payload.get("role")
        if not isinstance(identity, str) or not identity or not isinstance(role, str):
            raise InvalidTokenError("Token is missing identity claims")

        return TokenClaims(identity=identity, role=role)
