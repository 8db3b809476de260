"""Student account and profile endpoints."""

from fastapi import APIRouter, status

from campusconnect.api.dependencies import StudentServiceDep, TokenClaimsDep
from campusconnect.api.models import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    SignupRequest,
    auth_result_to_response,
    profile_to_fields,
    profile_to_response,
)

router = APIRouter(prefix="/students", tags=["students"])

_UNAUTHENTICATED = {status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def signup(body: SignupRequest, service: StudentServiceDep) -> AuthResponse:
    """Register a new student and return a token."""
    result = service.signup(
        name=body.name,
        email=body.email,
        course=body.course,
        password=body.password,
    )
    return auth_result_to_response(result)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def login(body: LoginRequest, service: StudentServiceDep) -> AuthResponse:
    """Log in with email and password."""
    result = service.login(email=body.email, password=body.password)
    return auth_result_to_response(result)


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={**_UNAUTHENTICATED, **_NOT_FOUND},
)
def get_profile(claims: TokenClaimsDep, service: StudentServiceDep) -> ProfileResponse:
    """Get the profile of the authenticated student."""
    profile = service.get_profile(claims)
    return profile_to_response(profile)


@router.put(
    "/profile",
    response_model=ProfileUpdateResponse,
    responses={**_UNAUTHENTICATED, **_NOT_FOUND},
)
def update_profile(
    claims: TokenClaimsDep, body: ProfileUpdate, service: StudentServiceDep
) -> ProfileUpdateResponse:
    """Update name and department of the authenticated student."""
    profile = service.update_profile(
        claims,
        first_name=body.first_name,
        last_name=body.last_name,
        department=body.department,
    )
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        student=profile_to_fields(profile),
    )
