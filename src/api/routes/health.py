"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_document_store
from core.config import settings
from infrastructure.database.document_store import SQLAlchemyDocumentStore

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    document_store: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    store: SQLAlchemyDocumentStore = Depends(get_document_store),
) -> HealthResponse:
    """
    Detailed health check including document store connectivity.

    Use for monitoring dashboards that need to verify all dependencies.
    """
    try:
        await store.ping()
        store_status = "healthy"
    except Exception as e:
        store_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if store_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=API_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        document_store=store_status,
    )
