"""
Routes untuk health check
"""
from fastapi import APIRouter

from app.api.models import HealthResponse
from app.api.utils import utc_timestamp

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe, independent of browser and cache state"""
    return HealthResponse(status="OK", timestamp=utc_timestamp())
