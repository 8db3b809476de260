"""Exceptions raised by the Student Service."""


class StudentServiceError(Exception):
    """Base exception for Student Service errors."""


class AlreadyExistsError(StudentServiceError):
    """A student with this email is already registered."""


class NotFoundError(StudentServiceError):
    """No student matches the email or token identity."""


class InvalidCredentialsError(StudentServiceError):
    """Password does not match the stored hash."""


class UnauthenticatedError(StudentServiceError):
    """Bearer token is missing, malformed, tampered with, or expired."""


class InternalError(StudentServiceError):
    """Unexpected failure in the store or hashing layer.

    The message is safe to show to clients; `detail` is for server logs and
    development responses only.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail
