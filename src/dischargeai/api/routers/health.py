"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...core.exceptions import DischargeAIException
from ..deps import AppSettingsDep, DischargeRepositoryDep
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    service: str


@router.get("", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request, settings: AppSettingsDep):
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    return ok(request, data=HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        service=settings.app_name,
    ), message="OK")


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness_check(request: Request, settings: AppSettingsDep, repository: DischargeRepositoryDep):
    """
    Readiness check endpoint.

    Checks the record store and whether a completion provider is configured.
    """
    checks = {"storage_backend": settings.storage.backend}
    all_ok = True

    try:
        checks["record_count"] = await repository.count()
        checks["database"] = "ok"
    except DischargeAIException as e:
        checks["database"] = f"error: {e.message[:50]}"
        all_ok = False

    if settings.azure_openai.is_configured:
        checks["completion_provider"] = "azure_openai"
        checks["completion_model"] = settings.azure_openai.deployment_name or "missing_deployment"
        all_ok = all_ok and bool(settings.azure_openai.deployment_name)
    elif settings.openai.api_key:
        checks["completion_provider"] = "openai"
        checks["completion_model"] = settings.openai.model
    else:
        checks["completion_provider"] = "not_configured"
        all_ok = False

    return ok(request, data={
        "status": "ready" if all_ok else "degraded",
        "timestamp": datetime.now(timezone.utc),
        "checks": checks,
    }, message="OK" if all_ok else "Some services unavailable")


@router.get("/live", response_model=ApiResponse[dict])
async def liveness_check(request: Request):
    """
    Liveness check endpoint.

    Returns whether the service is alive.
    """
    return ok(request, data={"status": "alive", "timestamp": datetime.now(timezone.utc)}, message="OK")
