"""
Markup extractor: rendered HTML to normalized catalog records
"""

import hashlib
import logging
import re
from datetime import datetime
from typing import Iterable, List, Optional, Sequence
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup, Tag

from .exceptions import ExtractionError
from .models import (
    CatalogItem,
    CatalogPage,
    ContentDetail,
    ContentKind,
    ExtractedLinks,
    LinkKind,
    PageKind,
    Provider,
    VideoLink,
    utc_timestamp,
)
from .rules import (
    CATALOG_CONTAINER_SELECTORS,
    CATALOG_FIELD_RULES,
    DETAIL_FIELD_RULES,
    DOWNLOAD_ANCHOR_SELECTOR,
    PAGINATION_SELECTORS,
    SERIES_MARKER_CLASS,
    first_match,
    parse_rating,
    parse_year,
)
from .urls import absolutize


logger = logging.getLogger(__name__)

DEFAULT_SYNOPSIS = "No description available"
DEFAULT_GENRES = ["Unknown"]

# Ordered: the first substring found in the URL names the provider
PROVIDER_MARKERS = (
    ('streamtape', Provider.STREAMTAPE),
    ('vidplay', Provider.VIDPLAY),
    ('doodstream', Provider.DOODSTREAM),
    ('mixdrop', Provider.MIXDROP),
    ('upstream', Provider.UPSTREAM),
)

SCRIPT_URL_PATTERN = re.compile(r'https?://[^\s"\'<>\\]+')
SCRIPT_MEDIA_EXTENSIONS = ('mp4', 'm3u8', 'mkv', 'avi')
RESPONSE_MEDIA_PATTERN = re.compile(r'\.mp4|\.m3u8|\.mkv', re.IGNORECASE)
PAGE_NUMBER_PATTERN = re.compile(r'^\d+$')


def provider_name(url: str) -> Provider:
    """Map an embed URL to its hosting provider"""
    lowered = url.lower()
    for marker, provider in PROVIDER_MARKERS:
        if marker in lowered:
            return provider
    return Provider.UNKNOWN


def is_known_provider(url: str) -> bool:
    return provider_name(url) is not Provider.UNKNOWN


def _media_extension(url: str) -> Optional[str]:
    """Media extension of the URL path, ignoring query and fragment"""
    extension = urlparse(url).path.rsplit('.', 1)[-1].lower()
    return extension if extension in SCRIPT_MEDIA_EXTENSIONS else None


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    unique_values = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique_values.append(value)
    return unique_values


def _parse(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", 'html.parser')
    except Exception as e:
        raise ExtractionError(f"Failed to parse markup: {e}") from e


class MarkupExtractor:
    """Turns rendered pages of the catalog site into normalized records"""

    def __init__(self, base_url: str):
        self.base_url = base_url

    def extract(self, html: str, page_kind: PageKind, **context):
        """Dispatch to the extractor for ``page_kind``"""
        if page_kind is PageKind.CATALOG:
            return self.extract_catalog(html, page=context.get('page', 1))
        if page_kind is PageKind.DETAIL:
            return self.extract_detail(html)
        if page_kind is PageKind.PLAYER_PAGE:
            return self.extract_player_page(html, context.get('response_urls', ()))
        raise ValueError(f"Unsupported page kind: {page_kind}")

    # Catalog listings

    def extract_catalog(self, html: str, page: int = 1) -> CatalogPage:
        soup = _parse(html)

        try:
            items = []
            for container in soup.select(", ".join(CATALOG_CONTAINER_SELECTORS)):
                item = self._catalog_item(container)
                if item is not None:
                    items.append(item)

            total_pages = max(self._total_pages(soup), 1)
        except Exception as e:
            logger.error(f"Catalog extraction failed: {e}")
            raise ExtractionError(f"Failed to extract catalog: {e}") from e

        logger.debug(f"Extracted {len(items)} catalog items (page {page}/{total_pages})")
        return CatalogPage(items=items, current_page=page, total_pages=total_pages)

    def _catalog_item(self, container: Tag) -> Optional[CatalogItem]:
        rules = CATALOG_FIELD_RULES

        title = first_match(container, rules['title'])
        link = first_match(container, rules['link'])
        if not title or not link:
            return None

        classes = container.get('class') or []
        kind = ContentKind.SERIES if SERIES_MARKER_CLASS in classes else ContentKind.MOVIE
        link = absolutize(link, self.base_url)

        year = parse_year(first_match(container, rules['year']))

        return CatalogItem(
            id=self._item_id(kind, link),
            title=title,
            kind=kind,
            year=year if year is not None else datetime.now().year,
            poster=absolutize(first_match(container, rules['poster']), self.base_url),
            link=link,
            rating=parse_rating(first_match(container, rules['rating'])),
            synopsis=first_match(container, rules['synopsis']) or DEFAULT_SYNOPSIS,
            genres=first_match(container, rules['genres']) or list(DEFAULT_GENRES)
        )

    @staticmethod
    def _item_id(kind: ContentKind, link: str) -> str:
        digest = hashlib.md5(link.encode('utf-8')).hexdigest()[:12]
        return f"{kind.value}_{digest}"

    @staticmethod
    def _total_pages(soup: BeautifulSoup) -> int:
        """Best-effort page count from pagination markers"""
        numbers = []

        for element in soup.select(", ".join(PAGINATION_SELECTORS)):
            text = element.get_text(strip=True)
            if PAGE_NUMBER_PATTERN.match(text):
                numbers.append(int(text))

        for anchor in soup.select('a[href*="page="]'):
            query = parse_qs(urlparse(anchor.get('href', '')).query)
            for value in query.get('page', []):
                if PAGE_NUMBER_PATTERN.match(value):
                    numbers.append(int(value))

        return max(numbers) if numbers else 1

    # Detail pages

    def extract_detail(self, html: str) -> ContentDetail:
        soup = _parse(html)
        rules = DETAIL_FIELD_RULES

        try:
            links = self._iframe_links(soup)
            links += self._script_links(soup, start=len(links))

            detail = ContentDetail(
                title=first_match(soup, rules['title']) or "",
                synopsis=first_match(soup, rules['synopsis']) or "",
                poster=absolutize(first_match(soup, rules['poster']), self.base_url),
                year=parse_year(first_match(soup, rules['year'])),
                duration=first_match(soup, rules['duration']) or "",
                genres=first_match(soup, rules['genres']) or list(DEFAULT_GENRES),
                rating=parse_rating(first_match(soup, rules['rating'])),
                links=links
            )
        except Exception as e:
            logger.error(f"Detail extraction failed: {e}")
            raise ExtractionError(f"Failed to extract content details: {e}") from e

        logger.debug(f"Extracted detail '{detail.title}' with {len(detail.links)} links")
        return detail

    def _iframe_links(self, soup: BeautifulSoup) -> List[VideoLink]:
        links = []
        for iframe in soup.select('iframe[src]'):
            src = iframe.get('src', '').strip()
            if not src or not is_known_provider(src):
                continue

            links.append(VideoLink(
                id=f"link_{len(links)}",
                provider=provider_name(src),
                url=absolutize(src, self.base_url),
                kind=LinkKind.IFRAME,
                quality="HD",
                format="MP4"
            ))
        return links

    @staticmethod
    def _script_links(soup: BeautifulSoup, start: int = 0) -> List[VideoLink]:
        """Media URLs embedded in inline scripts"""
        script_text = "\n".join(
            script.string or script.get_text()
            for script in soup.find_all('script')
            if not script.get('src')
        )
        # JSON-encoded URLs escape their slashes
        script_text = script_text.replace('\\/', '/')

        urls = _unique(match.group(0).rstrip('.,;)') for match in SCRIPT_URL_PATTERN.finditer(script_text))

        links = []
        for url in urls:
            extension = _media_extension(url)
            if extension is None:
                continue
            links.append(VideoLink(
                id=f"link_{start + len(links)}",
                provider=provider_name(url),
                url=url,
                kind=LinkKind.DIRECT,
                quality="HD",
                format="HLS" if extension == 'm3u8' else extension.upper()
            ))
        return links

    # Embedded player pages

    def extract_player_page(self, html: str, response_urls: Sequence[str] = ()) -> ExtractedLinks:
        """Collect observed media URLs and download anchors.

        Anchor hrefs are returned verbatim; unlike detail pages they are not
        resolved against the site origin.
        """
        soup = _parse(html)

        try:
            video_urls = _unique(url for url in response_urls if RESPONSE_MEDIA_PATTERN.search(url))
            download_links = _unique(
                anchor.get('href')
                for anchor in soup.select(DOWNLOAD_ANCHOR_SELECTOR)
                if anchor.get('href')
            )
        except Exception as e:
            logger.error(f"Player page extraction failed: {e}")
            raise ExtractionError(f"Failed to extract player links: {e}") from e

        return ExtractedLinks(
            video_urls=video_urls,
            download_links=download_links,
            extracted_at=utc_timestamp()
        )
