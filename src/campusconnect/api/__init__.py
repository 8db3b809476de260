"""REST API for CampusConnect."""

from campusconnect.api.app import app, create_app
from campusconnect.api.models import (
    AuthResponse,
    ErrorResponse,
    ProfileResponse,
    ProfileUpdate,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "app",
    "create_app",
]
