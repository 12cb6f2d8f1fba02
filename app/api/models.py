"""
Pydantic models untuk request dan response API
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class CatalogType(str, Enum):
    ALL = "all"
    MOVIES = "movies"
    SERIES = "series"


class ExtractLinkRequest(BaseModel):
    iframeUrl: Optional[str] = None


class CatalogItemResponse(BaseModel):
    id: str
    title: str
    type: str
    year: int
    poster: str
    link: str
    rating: Optional[float] = None
    synopsis: str
    genres: List[str]


class CatalogResponse(BaseModel):
    items: List[CatalogItemResponse]
    totalPages: int
    currentPage: int
    totalItems: int


class VideoLinkResponse(BaseModel):
    id: str
    provider: str
    quality: str
    format: str
    url: str
    type: str


class ContentDetailResponse(BaseModel):
    title: str
    synopsis: str
    poster: str
    year: Optional[int] = None
    duration: str
    genres: List[str]
    rating: Optional[float] = None
    links: List[VideoLinkResponse]


class ExtractedLinksResponse(BaseModel):
    videoUrls: List[str]
    downloadLinks: List[str]
    extractedAt: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class CacheStatsResponse(BaseModel):
    total_requests: int
    hit_rate: float
    size: int
    ttl_seconds: int
    cache_stats: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None
