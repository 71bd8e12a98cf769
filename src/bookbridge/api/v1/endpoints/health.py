"""Health check endpoints — Service and provider health monitoring."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from bookbridge import __version__
from bookbridge.adapters.base.adapter import AdapterHealth
from bookbridge.api.deps import get_facade
from bookbridge.core.facade import BookSearchFacade

router = APIRouter()


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="BookBridge server version")
    service: str = Field(description="Service name ('bookbridge')")
    providers: list[str] = Field(description="Configured provider names")


class ProviderHealthResponse(BaseModel):
    """Per-provider health check response."""

    providers: dict[str, AdapterHealth] = Field(description="Map of provider name to its health status")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service Health Check",
    description="Returns service status, version, and the configured providers. Makes no upstream calls.",
)
async def health_check(
    facade: BookSearchFacade = Depends(get_facade),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="bookbridge",
        providers=[p.value for p in facade.adapters],
    )


@router.get(
    "/health/providers",
    response_model=ProviderHealthResponse,
    summary="Provider Health Check",
    description=(
        "Probe every provider with a minimal search and report per-provider "
        "status, latency, and diagnostic message."
    ),
)
async def provider_health(
    facade: BookSearchFacade = Depends(get_facade),
) -> ProviderHealthResponse:
    """Check health of all providers."""
    return ProviderHealthResponse(providers=await facade.health_check_all())
