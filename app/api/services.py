"""
Business logic services untuk scraping operations
"""
import logging
from typing import Any, Dict

from app.api.dependencies import AppState
from app.api.exceptions import CatalogFetchError, ContentFetchError, LinkExtractionError
from app.api.utils import measure_execution_time
from app.scraper import (
    PageKind,
    WaitPolicy,
    catalog_cache_key,
    content_cache_key,
    links_cache_key,
)
from app.scraper.rules import CATALOG_CONTAINER_SELECTORS
from app.scraper.urls import build_catalog_url

logger = logging.getLogger(__name__)

CATALOG_WAIT_SELECTOR = ", ".join(CATALOG_CONTAINER_SELECTORS)


class CatalogService:
    """Service untuk catalog listings"""

    @staticmethod
    @measure_execution_time
    async def get_catalog(app_state: AppState, page: int, search: str, content_type: str) -> Dict[str, Any]:
        cache_key = catalog_cache_key(page, search, content_type)
        cached = app_state.cache.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for {cache_key}")
            return cached

        try:
            url = build_catalog_url(app_state.scrape_config.base_url, page, search, content_type)
            document = await app_state.browser.render(
                url,
                WaitPolicy.for_selector(
                    CATALOG_WAIT_SELECTOR,
                    timeout_ms=app_state.scrape_config.selector_timeout_ms
                )
            )
            catalog = app_state.extractor.extract(document.html, PageKind.CATALOG, page=page)
        except Exception as e:
            logger.error(f"Catalog scraping error: {e}")
            raise CatalogFetchError(str(e))

        result = catalog.to_dict()
        app_state.cache.set(cache_key, result)
        return result


class ContentService:
    """Service untuk content detail pages"""

    @staticmethod
    @measure_execution_time
    async def get_content(app_state: AppState, link: str) -> Dict[str, Any]:
        cache_key = content_cache_key(link)
        cached = app_state.cache.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for content {link}")
            return cached

        try:
            document = await app_state.browser.render(link, WaitPolicy.network_idle())
            detail = app_state.extractor.extract(document.html, PageKind.DETAIL)
        except Exception as e:
            logger.error(f"Content error for {link}: {e}")
            raise ContentFetchError(str(e))

        result = detail.to_dict()
        app_state.cache.set(cache_key, result)
        return result


class LinkService:
    """Service untuk player page link extraction"""

    @staticmethod
    @measure_execution_time
    async def extract_links(app_state: AppState, iframe_url: str) -> Dict[str, Any]:
        cache_key = links_cache_key(iframe_url)
        cached = app_state.cache.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for player page {iframe_url}")
            return cached

        try:
            document = await app_state.browser.render(
                iframe_url,
                WaitPolicy.network_idle(),
                capture_responses=True,
                settle_ms=app_state.scrape_config.link_settle_ms
            )
            links = app_state.extractor.extract(
                document.html,
                PageKind.PLAYER_PAGE,
                response_urls=document.response_urls
            )
        except Exception as e:
            logger.error(f"Link extraction error for {iframe_url}: {e}")
            raise LinkExtractionError(str(e))

        result = links.to_dict()
        app_state.cache.set(cache_key, result)
        return result
