"""Student Service - account and profile flows."""

from campusconnect.students.exceptions import (
    AlreadyExistsError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    StudentServiceError,
    UnauthenticatedError,
)
from campusconnect.students.models import AuthResult, ProfileView, join_name, split_name
from campusconnect.students.service import StudentService

__all__ = [
    "AlreadyExistsError",
    "AuthResult",
    "InternalError",
    "InvalidCredentialsError",
    "NotFoundError",
    "ProfileView",
    "StudentService",
    "StudentServiceError",
    "UnauthenticatedError",
    "join_name",
    "split_name",
]
