"""Exceptions for bearer token handling."""


class TokenError(Exception):
    """Base exception for token errors."""


class InvalidTokenError(TokenError):
    """Token is malformed, has a bad signature, is expired, or lacks claims."""
