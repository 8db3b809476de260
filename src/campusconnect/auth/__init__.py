"""Auth - password hashing and bearer tokens."""

from campusconnect.auth.exceptions import InvalidTokenError, TokenError
from campusconnect.auth.passwords import hash_if_changed, hash_password, verify_password
from campusconnect.auth.tokens import ROLE_STUDENT, TokenClaims, TokenIssuer

__all__ = [
    "ROLE_STUDENT",
    "InvalidTokenError",
    "TokenClaims",
    "TokenError",
    "TokenIssuer",
    "hash_if_changed",
    "hash_password",
    "verify_password",
]
