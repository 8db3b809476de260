"""Health check endpoint."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from campusconnect.api.dependencies import CredentialStoreDep
from campusconnect.api.models import HealthResponse

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse)
def health(request: Request, store: CredentialStoreDep) -> HealthResponse:
    """Report service and database status."""
    settings = request.app.state.settings
    return HealthResponse(
        status="OK",
        message="Server is running",
        timestamp=datetime.now(UTC).isoformat(),
        database="Connected" if store.ping() else "Disconnected",
        uptime=time.monotonic() - _STARTED_AT,
        environment=settings.environment,
    )
