"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from campusconnect.auth import TokenClaims, TokenIssuer
from campusconnect.config import Settings
from campusconnect.credential_store import CredentialStore
from campusconnect.students import StudentService

# Global CredentialStore instance (initialized on app startup)
_credential_store: CredentialStore | None = None


def init_credential_store(db_path: str = "campusconnect.db") -> CredentialStore:
    """Initialize the global CredentialStore instance."""
    global _credential_store  # noqa: PLW0603
    _credential_store = CredentialStore(db_path)
    return _credential_store


def close_credential_store() -> None:
    """Close the global CredentialStore instance."""
    global _credential_store  # noqa: PLW0603
    if _credential_store is not None:
        _credential_store.close()
        _credential_store = None


def get_credential_store() -> Generator[CredentialStore, None, None]:
    """Dependency that provides the CredentialStore instance."""
    if _credential_store is None:
        raise RuntimeError("CredentialStore not initialized. Call init_credential_store() first.")
    yield _credential_store


# Type alias for dependency injection
CredentialStoreDep = Annotated[CredentialStore, Depends(get_credential_store)]

# Global StudentService instance (initialized on app startup)
_student_service: StudentService | None = None


def init_student_service(store: CredentialStore, settings: Settings) -> StudentService:
    """Initialize the global StudentService instance."""
    global _student_service  # noqa: PLW0603
    _student_service = StudentService(
        store=store,
        token_issuer=TokenIssuer(settings.token),
        bcrypt_rounds=settings.bcrypt_rounds,
    )
    return _student_service


def close_student_service() -> None:
    """Close the global StudentService instance."""
    global _student_service  # noqa: PLW0603
    _student_service = None


def get_student_service() -> Generator[StudentService, None, None]:
    """Dependency that provides the StudentService instance."""
    if _student_service is None:
        raise RuntimeError("StudentService not initialized. Call init_student_service() first.")
    yield _student_service


# Type alias for dependency injection
StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]

# Missing or non-Bearer headers yield None; the service decides what that means
_bearer = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> str | None:
    """Dependency that extracts the raw token from `Authorization: Bearer <token>`."""
    if credentials is None:
        return None
    return credentials.credentials or None


BearerTokenDep = Annotated[str | None, Depends(get_bearer_token)]


def get_token_claims(token: BearerTokenDep, service: StudentServiceDep) -> TokenClaims:
    """Dependency that verifies the bearer token before the request body is validated.

    Raises:
        UnauthenticatedError: If the token is missing or invalid.
    """
    return service.authenticate(token)


TokenClaimsDep = Annotated[TokenClaims, Depends(get_token_claims)]
