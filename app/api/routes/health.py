# app/api/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import Field

from app.core.config import get_settings
from app.schemas.board import BoardModel


router = APIRouter(prefix="/api", tags=["Health"])


class HealthResponse(BoardModel):
    """
    Response schema for the health check endpoint.
    """

    ok: bool = Field(..., description="Always true when the process is serving.", examples=[True])
    time: datetime = Field(
        ...,
        description="Server-side timestamp (UTC) at which this health check was generated.",
        examples=["2025-01-01T10:30:00Z"],
    )
    app_name: str = Field(..., examples=["are-they-in-api"])
    environment: str = Field(..., examples=["local"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check for the board feed service",
    description=(
        "Lightweight endpoint to verify that the service is up and responding.\n\n"
        "It does not touch the source board, so it stays green while the "
        "source is down and `/api/status` is serving a stale snapshot."
    ),
)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        ok=True,
        time=datetime.now(tz=timezone.utc),
        app_name=settings.APP_NAME,
        environment=settings.APP_ENV,
    )
