"""Pydantic models for REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# The student entity has no year attribute; the profile endpoint has always
# reported this fixed value.
PLACEHOLDER_YEAR = "3"


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str


# Account models


class SignupRequest(BaseModel):
    """Request model for student signup."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    course: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request model for student login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class StudentSummary(BaseModel):
    """Public fields of a student account. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    course: str


class AuthResponse(BaseModel):
    """Response model for signup and login."""

    token: str
    student: StudentSummary


def auth_result_to_response(result: Any) -> AuthResponse:
    """Convert an AuthResult to AuthResponse."""
    return AuthResponse(
        token=result.token,
        student=StudentSummary.model_validate(result.student),
    )


# Profile models


class ProfileFields(BaseModel):
    """Derived profile view, serialized with camelCase keys."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    department: str


class ProfileResponse(ProfileFields):
    """Response model for GET /profile."""

    year: str = PLACEHOLDER_YEAR


class ProfileUpdate(BaseModel):
    """Request model for PUT /profile."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", max_length=255)
    last_name: str = Field(default="", alias="lastName", max_length=255)
    department: str = Field(..., max_length=255)


class ProfileUpdateResponse(BaseModel):
    """Response model for PUT /profile."""

    message: str
    student: ProfileFields


def profile_to_response(profile: Any) -> ProfileResponse:
    """Convert a ProfileView to ProfileResponse."""
    return ProfileResponse.model_validate(profile)


def profile_to_fields(profile: Any) -> ProfileFields:
    """Convert a ProfileView to ProfileFields."""
    return ProfileFields.model_validate(profile)


# Health models


class HealthResponse(BaseModel):
    """Response model for GET /health."""

    status: str
    message: str
    timestamp: str
    database: str
    uptime: float
    environment: str
