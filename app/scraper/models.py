"""
Data models for the scraper
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional


class ContentKind(str, Enum):
    MOVIE = "movie"
    SERIES = "series"


class LinkKind(str, Enum):
    IFRAME = "iframe"
    DIRECT = "direct"


class Provider(str, Enum):
    STREAMTAPE = "StreamTape"
    VIDPLAY = "VidPlay"
    DOODSTREAM = "DoodStream"
    MIXDROP = "MixDrop"
    UPSTREAM = "UpStream"
    UNKNOWN = "Unknown Provider"


class PageKind(str, Enum):
    """Kinds of rendered page the extractor understands"""
    CATALOG = "catalog"
    DETAIL = "detail"
    PLAYER_PAGE = "player_page"


@dataclass
class CatalogItem:
    """One listing on a catalog page"""
    id: str
    title: str
    kind: ContentKind
    year: int
    poster: str
    link: str
    rating: Optional[float] = None
    synopsis: str = "No description available"
    genres: List[str] = field(default_factory=lambda: ["Unknown"])

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'id': self.id,
            'title': self.title,
            'type': self.kind.value,
            'year': self.year,
            'poster': self.poster,
            'link': self.link,
            'rating': self.rating,
            'synopsis': self.synopsis,
            'genres': list(self.genres)
        }


@dataclass
class CatalogPage:
    """Catalog items scraped from one listing page"""
    items: List[CatalogItem]
    current_page: int = 1
    total_pages: int = 1

    @property
    def total_items(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict:
        return {
            'items': [item.to_dict() for item in self.items],
            'totalPages': self.total_pages,
            'currentPage': self.current_page,
            'totalItems': self.total_items
        }


@dataclass
class VideoLink:
    """A playable source found on a detail page"""
    id: str
    provider: Provider
    url: str
    kind: LinkKind
    quality: str = "HD"
    format: str = "MP4"

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'provider': self.provider.value,
            'quality': self.quality,
            'format': self.format,
            'url': self.url,
            'type': self.kind.value
        }


@dataclass
class ContentDetail:
    """Data structure for a movie or series detail page"""
    title: str
    synopsis: str
    poster: str
    year: Optional[int]
    duration: str
    genres: List[str]
    rating: Optional[float]
    links: List[VideoLink] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'synopsis': self.synopsis,
            'poster': self.poster,
            'year': self.year,
            'duration': self.duration,
            'genres': list(self.genres),
            'rating': self.rating,
            'links': [link.to_dict() for link in self.links]
        }


@dataclass
class ExtractedLinks:
    """Media and download URLs found on an embedded player page"""
    video_urls: List[str]
    download_links: List[str]
    extracted_at: str

    def to_dict(self) -> Dict:
        return {
            'videoUrls': list(self.video_urls),
            'downloadLinks': list(self.download_links),
            'extractedAt': self.extracted_at
        }


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
