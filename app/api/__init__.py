"""
API module untuk catalog scraper

Module ini berisi semua komponen API termasuk FastAPI app factory,
models, routes, middleware, dan utilities.
"""

from .app import create_app
from .config import settings
from .models import (
    CatalogType,
    ExtractLinkRequest,
    CatalogItemResponse,
    CatalogResponse,
    VideoLinkResponse,
    ContentDetailResponse,
    ExtractedLinksResponse,
    HealthResponse,
    CacheStatsResponse,
    ErrorResponse
)
from .exceptions import (
    ScraperAPIError,
    ValidationError,
    MissingContentLinkError,
    MissingIframeUrlError,
    CatalogFetchError,
    ContentFetchError,
    LinkExtractionError
)
from .dependencies import AppState

__all__ = [
    # App factory
    'create_app',

    # Configuration
    'settings',

    # Models
    'CatalogType',
    'ExtractLinkRequest',
    'CatalogItemResponse',
    'CatalogResponse',
    'VideoLinkResponse',
    'ContentDetailResponse',
    'ExtractedLinksResponse',
    'HealthResponse',
    'CacheStatsResponse',
    'ErrorResponse',

    # Exceptions
    'ScraperAPIError',
    'ValidationError',
    'MissingContentLinkError',
    'MissingIframeUrlError',
    'CatalogFetchError',
    'ContentFetchError',
    'LinkExtractionError',

    # Dependencies
    'AppState'
]
