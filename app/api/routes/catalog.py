"""
Routes untuk catalog listings
"""
from fastapi import APIRouter, Depends, Query

from app.api.dependencies import AppState, get_app_state
from app.api.models import CatalogResponse, CatalogType, ErrorResponse
from app.api.services import CatalogService

router = APIRouter(tags=["catalog"])


@router.get(
    "/api/catalog",
    response_model=CatalogResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_catalog(
    page: int = Query(1, ge=1),
    search: str = Query(""),
    type: CatalogType = Query(CatalogType.ALL),
    app_state: AppState = Depends(get_app_state)
):
    """Scrape one page of the movie/series catalog"""
    return await CatalogService.get_catalog(
        app_state=app_state,
        page=page,
        search=search.strip(),
        content_type=type.value
    )
