"""
Routes untuk player link extraction
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import AppState, get_app_state
from app.api.exceptions import MissingIframeUrlError
from app.api.models import ErrorResponse, ExtractedLinksResponse, ExtractLinkRequest
from app.api.services import LinkService
from app.api.validators import UrlValidator

router = APIRouter(tags=["links"])


@router.post(
    "/api/extract-link",
    response_model=ExtractedLinksResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def extract_link(
    request: ExtractLinkRequest,
    app_state: AppState = Depends(get_app_state)
):
    """Load an embedded player and collect the media URLs it requests"""
    iframe_url = UrlValidator.validate_absolute_url(request.iframeUrl, MissingIframeUrlError(), "iframeUrl")
    return await LinkService.extract_links(app_state=app_state, iframe_url=iframe_url)
