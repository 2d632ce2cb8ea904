"""Liveness endpoint."""

from datetime import datetime, timezone

from beartype import beartype
from fastapi import APIRouter, Request

from ...schemas.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
@beartype
async def health_check(request: Request) -> HealthResponse:
    """Report that the service process is up."""
    return HealthResponse(
        status="healthy",
        service=request.app.state.service_name,
        timestamp=datetime.now(timezone.utc),
    )
