"""
Routes untuk cache statistics
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import get_cache
from app.api.models import CacheStatsResponse
from app.scraper import ResponseCache

router = APIRouter(prefix="/api/cache", tags=["cache"])


@router.get("/stats", response_model=CacheStatsResponse)
async def get_cache_stats(cache: ResponseCache = Depends(get_cache)):
    """Get cache statistics"""
    return cache.get_cache_statistics()
