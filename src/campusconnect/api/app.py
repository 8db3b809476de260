"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campusconnect import __version__
from campusconnect.api.dependencies import (
    close_credential_store,
    close_student_service,
    init_credential_store,
    init_student_service,
)
from campusconnect.api.middleware import RequestLoggingMiddleware
from campusconnect.api.models import ErrorResponse
from campusconnect.api.routes import health, students
from campusconnect.config import Settings
from campusconnect.students import (
    AlreadyExistsError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
        headers=headers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    # Startup
    store = init_credential_store(settings.db_path)
    init_student_service(store, settings)
    logger.info(
        "CampusConnect backend started (environment=%s, db=%s)",
        settings.environment,
        settings.db_path,
    )

    yield
    # Shutdown
    close_student_service()
    close_credential_store()


def register_exception_handlers(app: FastAPI, development: bool = False) -> None:
    """Map service errors to JSON `{"message": ...}` responses.

    Args:
        app: Application to register handlers on.
        development: Return exception details for internal errors instead of
            the generic message.
    """

    @app.exception_handler(AlreadyExistsError)
    async def already_exists_handler(_request: Request, exc: AlreadyExistsError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        _request: Request, exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(
        _request: Request, exc: UnauthenticatedError
    ) -> JSONResponse:
        return _error(
            status.HTTP_401_UNAUTHORIZED,
            str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(InternalError)
    async def internal_error_handler(_request: Request, exc: InternalError) -> JSONResponse:
        message = exc.detail if development and exc.detail else str(exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info("Route not found: %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found"},
            )
        return _error(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        message = str(exc) if development else GENERIC_ERROR_MESSAGE
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="CampusConnect API",
        description="REST API for CampusConnect student accounts",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager and handlers
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, development=settings.is_development)

    # Include routers
    app.include_router(students.router, prefix="/api")
    app.include_router(health.router)

    return app


# Default app instance
app = create_app()
