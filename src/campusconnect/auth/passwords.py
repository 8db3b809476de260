"""Password hashing using bcrypt.

Hashes carry their own salt and cost factor, so verification works for any
cost factor a hash was created with.
"""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with a random salt.

    Args:
        password: The plaintext password to hash.
        rounds: bcrypt cost factor.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("s3cret", rounds=4)
        >>> hashed.startswith("$2b$04$")
        True
    """
    hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    Uses bcrypt's constant-time comparison. A malformed hash is treated as
    a mismatch.

    Args:
        password: The plaintext password to verify.
        hashed: The hashed password to verify against.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def hash_if_changed(
    password: str,
    current_hash: str | None = None,
    rounds: int = DEFAULT_ROUNDS,
) -> str:
    """Return a hash for `password`, reusing `current_hash` if it still matches.

    Args:
        password: The plaintext password about to be stored.
        current_hash: The hash currently on record, if any.
        rounds: bcrypt cost factor for a fresh hash.

    Returns:
        `current_hash` when it already verifies `password`, otherwise a new hash.
    """
    if current_hash is not None and verify_password(password, current_hash):
        return current_hash
    return hash_password(password, rounds=rounds)
