"""
Scraper module untuk catalog API

Module ini berisi komponen scraping: rendering gateway (headless browser),
markup extractor, response cache, dan data models.
"""

from .browser import BrowserManager, BrowserState, RenderedDocument, WaitPolicy
from .cache_manager import ResponseCache, catalog_cache_key, content_cache_key, links_cache_key
from .config import ScrapeConfig
from .exceptions import ExtractionError, RenderError, ScraperError
from .extractor import MarkupExtractor, provider_name
from .models import (
    CatalogItem,
    CatalogPage,
    ContentDetail,
    ContentKind,
    ExtractedLinks,
    LinkKind,
    PageKind,
    Provider,
    VideoLink
)

__all__ = [
    # Rendering gateway
    'BrowserManager',
    'BrowserState',
    'RenderedDocument',
    'WaitPolicy',

    # Extraction
    'MarkupExtractor',
    'provider_name',

    # Cache
    'ResponseCache',
    'catalog_cache_key',
    'content_cache_key',
    'links_cache_key',

    # Configuration
    'ScrapeConfig',

    # Errors
    'ScraperError',
    'RenderError',
    'ExtractionError',

    # Data models
    'CatalogItem',
    'CatalogPage',
    'ContentDetail',
    'ContentKind',
    'ExtractedLinks',
    'LinkKind',
    'PageKind',
    'Provider',
    'VideoLink'
]
