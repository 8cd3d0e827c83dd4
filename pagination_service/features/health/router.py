"""Health check router."""
from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from pagination_service.core.settings import get_app_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str = Field(description="Always 'ok' while the process serves requests")
    service: str = Field(description="Service name")
    store_ready: bool = Field(description="Whether the DynamoDB client is initialized")


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health(request: Request) -> HealthResponse:
    """Report that the process is up, and whether the store client is ready."""
    store = getattr(request.app.state, "store", None)
    return HealthResponse(
        status="ok",
        service=get_app_settings().service_name,
        store_ready=bool(store is not None and store.is_ready),
    )
