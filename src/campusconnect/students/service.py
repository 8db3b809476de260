"""StudentService - signup, login and profile management."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from campusconnect.auth import (
    ROLE_STUDENT,
    InvalidTokenError,
    hash_if_changed,
    verify_password,
)
from campusconnect.auth.passwords import DEFAULT_ROUNDS
from campusconnect.credential_store import StudentExistsError, StudentNotFoundError
from campusconnect.students.exceptions import (
    AlreadyExistsError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    StudentServiceError,
    UnauthenticatedError,
)
from campusconnect.students.models import AuthResult, ProfileView, join_name

if TYPE_CHECKING:
    from campusconnect.auth import TokenClaims, TokenIssuer
    from campusconnect.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class StudentService:
    """Orchestrates the student account flows.

    Every operation is independent: nothing is cached between calls, and
    identity comes only from the bearer token presented with the call.
    """

    def __init__(
        self,
        store: CredentialStore,
        token_issuer: TokenIssuer,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        """Initialize the service.

        Args:
            store: Credential Store holding student records.
            token_issuer: Issuer used to mint and verify bearer tokens.
            bcrypt_rounds: Cost factor for new password hashes.
        """
        self.store = store
        self.token_issuer = token_issuer
        self.bcrypt_rounds = bcrypt_rounds

    def signup(self, name: str, email: str, course: str, password: str) -> AuthResult:
        """Register a new student and log them in.

        Raises:
            AlreadyExistsError: If the email is already registered.
            InternalError: On unexpected store or hashing failures.
        """
        logger.info("Signup attempt for email: %s", email)
        with self._internal_errors("Something went wrong"):
            if self.store.find_by_email(email) is not None:
                logger.info("Signup failed - student already exists: %s", email)
                raise AlreadyExistsError("Student already exists")

            password_hash = hash_if_changed(password, rounds=self.bcrypt_rounds)
            try:
                student = self.store.create(
                    name=name,
                    email=email,
                    course=course,
                    password_hash=password_hash,
                )
            except StudentExistsError as e:
                # Lost a race with a concurrent signup for the same email
                logger.info("Signup failed - student already exists: %s", email)
                raise AlreadyExistsError("Student already exists") from e
            logger.info("New student created: %s, Course: %s", email, course)

            token = self.token_issuer.issue(student.id, ROLE_STUDENT)
            logger.info("Token issued for student: %s", email)
            return AuthResult(token=token, student=student)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a token.

        Raises:
            NotFoundError: If no student has this email.
            InvalidCredentialsError: If the password does not match.
            InternalError: On unexpected store or hashing failures.
        """
        logger.info("Login attempt for email: %s", email)
        with self._internal_errors("Something went wrong"):
            student = self.store.find_by_email(email)
            if student is None:
                logger.info("Login failed - student not found: %s", email)
                raise NotFoundError("Student not found")

            if not verify_password(password, student.password_hash):
                logger.info("Login failed - invalid credentials: %s", email)
                raise InvalidCredentialsError("Invalid credentials")

            token = self.token_issuer.issue(student.id, ROLE_STUDENT)
            logger.info("Login successful for: %s", email)
            return AuthResult(token=token, student=student)

    def authenticate(self, token: str | None) -> TokenClaims:
        """Verify a bearer token and return its claims.

        Raises:
            UnauthenticatedError: If the token is missing, malformed or expired.
        """
        if not token:
            logger.info("Profile access denied - no token provided")
            raise UnauthenticatedError("No token provided")
        try:
            return self.token_issuer.verify(token)
        except InvalidTokenError as e:
            logger.info("Profile access denied - %s", e)
            raise UnauthenticatedError("Invalid or expired token") from e

    def get_profile(self, claims: TokenClaims) -> ProfileView:
        """Return the profile of the student the claims identify.

        Raises:
            NotFoundError: If the account no longer exists.
            InternalError: On unexpected store failures.
        """
        logger.info("Profile request for student ID: %s", claims.identity)
        with self._internal_errors("Error fetching profile"):
            student = self.store.find_by_id(claims.identity)
            if student is None:
                logger.info("Profile fetch failed - student not found: %s", claims.identity)
                raise NotFoundError("Student not found")

            logger.info("Profile fetched successfully for: %s", student.email)
            return ProfileView.from_student(student)

    def update_profile(
        self,
        claims: TokenClaims,
        first_name: str,
        last_name: str,
        department: str,
    ) -> ProfileView:
        """Update name and department for the student the claims identify.

        Raises:
            NotFoundError: If the account no longer exists.
            InternalError: On unexpected store failures.
        """
        logger.info("Profile update for student ID: %s", claims.identity)
        with self._internal_errors("Error updating profile"):
            try:
                student = self.store.update_by_id(
                    claims.identity,
                    name=join_name(first_name, last_name),
                    course=department,
                )
            except StudentNotFoundError as e:
                logger.info("Profile update failed - student not found: %s", claims.identity)
                raise NotFoundError("Student not found") from e

            logger.info("Profile updated successfully for: %s", student.email)
            return ProfileView.from_student(student)

    @contextmanager
    def _internal_errors(self, message: str) -> Iterator[None]:
        """Re-raise unexpected failures as InternalError with a public message."""
        try:
            yield
        except StudentServiceError:
            raise
        except Exception as e:
            logger.exception("%s: %s", message, e)
            raise InternalError(message, detail=str(e)) from e
