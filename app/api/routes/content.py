"""
Routes untuk content detail pages
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import AppState, get_app_state
from app.api.exceptions import MissingContentLinkError
from app.api.models import ContentDetailResponse, ErrorResponse
from app.api.services import ContentService
from app.api.validators import UrlValidator

router = APIRouter(tags=["content"])


@router.get(
    "/api/content/{content_id}",
    response_model=ContentDetailResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_content(
    content_id: str,
    link: Optional[str] = Query(None),
    app_state: AppState = Depends(get_app_state)
):
    """Scrape a detail page; ``link`` is the page URL, ``content_id`` is informational"""
    link = UrlValidator.validate_absolute_url(link, MissingContentLinkError(), "link")
    return await ContentService.get_content(app_state=app_state, link=link)
