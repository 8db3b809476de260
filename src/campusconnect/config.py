"""Runtime configuration for the CampusConnect backend."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "campusconnect.db"
DEFAULT_TOKEN_TTL = timedelta(hours=1)
DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3500",
    "http://localhost:3000",
    "http://frontend-service:3500",
)

DEVELOPMENT = "development"
PRODUCTION = "production"

# Only used when running in development without a configured secret
DEV_TOKEN_SECRET = "campusconnect-dev-secret"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class TokenConfig:
    """Signing configuration for bearer tokens."""

    secret: str
    ttl: timedelta = DEFAULT_TOKEN_TTL
    algorithm: str = "HS256"


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Build from the process environment with `Settings.from_env()`, or
    construct directly in tests.
    """

    token: TokenConfig = field(default_factory=lambda: TokenConfig(secret=DEV_TOKEN_SECRET))
    db_path: str = DEFAULT_DB_PATH
    environment: str = DEVELOPMENT
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def is_development(self) -> bool:
        """Whether detailed error messages may be returned to clients."""
        return self.environment == DEVELOPMENT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If a value is malformed, or the token secret is
                missing outside development.
        """
        env = os.environ if environ is None else environ

        environment = env.get("CAMPUSCONNECT_ENV", DEVELOPMENT).strip().lower()

        secret = env.get("CAMPUSCONNECT_JWT_SECRET", "")
        if not secret:
            if environment != DEVELOPMENT:
                raise ConfigError("CAMPUSCONNECT_JWT_SECRET must be set outside development")
            logger.warning("CAMPUSCONNECT_JWT_SECRET not set, using development secret")
            secret = DEV_TOKEN_SECRET

        ttl_seconds = _parse_int(
            env, "CAMPUSCONNECT_TOKEN_TTL_SECONDS", int(DEFAULT_TOKEN_TTL.total_seconds())
        )
        if ttl_seconds <= 0:
            raise ConfigError("CAMPUSCONNECT_TOKEN_TTL_SECONDS must be positive")

        bcrypt_rounds = _parse_int(env, "CAMPUSCONNECT_BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)
        if not 4 <= bcrypt_rounds <= 31:
            raise ConfigError("CAMPUSCONNECT_BCRYPT_ROUNDS must be between 4 and 31")

        origins_value = env.get("CAMPUSCONNECT_CORS_ORIGINS")
        if origins_value:
            origins = [o.strip() for o in origins_value.split(",") if o.strip()]
        else:
            origins = list(DEFAULT_CORS_ORIGINS)
        for extra in ("FRONTEND_URL", "FRONTEND_SERVICE_URL"):
            if env.get(extra):
                origins.append(env[extra])

        return cls(
            token=TokenConfig(secret=secret, ttl=timedelta(seconds=ttl_seconds)),
            db_path=env.get("CAMPUSCONNECT_DB_PATH", DEFAULT_DB_PATH),
            environment=environment,
            bcrypt_rounds=bcrypt_rounds,
            cors_origins=tuple(origins),
            host=env.get("CAMPUSCONNECT_HOST", DEFAULT_HOST),
            port=_parse_int(env, "CAMPUSCONNECT_PORT", DEFAULT_PORT),
        )


def _parse_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = env.get(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from e
