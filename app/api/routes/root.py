"""
Main routes untuk aplikasi
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import AppState, get_app_state

router = APIRouter()


@router.get("/")
async def root(app_state: AppState = Depends(get_app_state)):
    """Root endpoint with service status"""
    return {
        "message": "Catalog Scraper API is up and running",
        "status": "running",
        "version": app_state.settings.API_VERSION,
        "browser": app_state.browser.state.value,
        "endpoints": [
            "GET /api/health",
            "GET /api/catalog",
            "GET /api/content/{id}?link=",
            "POST /api/extract-link",
            "GET /api/cache/stats"
        ]
    }
