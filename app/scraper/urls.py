"""
URL helpers for the catalog site
"""

import base64
from urllib.parse import quote, urljoin, urlparse


CATALOG_PATHS = {
    'all': '',
    'movies': '/movies',
    'series': '/series',
}


def build_catalog_url(base_url: str, page: int = 1, search: str = "", content_type: str = "all") -> str:
    """Build the listing URL for a catalog page.

    A search query takes precedence over the type filter. Page numbers above 1
    are appended as a ``page`` query parameter.
    """
    url = base_url.rstrip('/')

    if search:
        url += f"/search?q={quote(search, safe='')}"
    else:
        url += CATALOG_PATHS.get(content_type, '')

    if page > 1:
        url += f"{'&' if search else '?'}page={page}"

    return url


def is_absolute(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def absolutize(url: str, base_url: str) -> str:
    """Resolve a scraped URL against the site origin when it is relative"""
    if not url:
        return ""

    url = url.strip()
    if is_absolute(url):
        return url

    return urljoin(base_url.rstrip('/') + '/', url)


def encode_url_key(url: str) -> str:
    """Base64 form of a URL, safe to embed in a cache key"""
    return base64.b64encode(url.encode('utf-8')).decode('ascii')
