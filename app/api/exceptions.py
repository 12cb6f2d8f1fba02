"""
Custom exceptions untuk API
"""
from typing import Any, Optional

from fastapi import HTTPException


class ScraperAPIError(HTTPException):
    """HTTP error rendered as ``{"error": ..., "details": ...}``"""

    def __init__(self, status_code: int, error: str, details: Optional[Any] = None):
        self.error = error
        self.details = details
        super().__init__(status_code=status_code, detail=error)

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(ScraperAPIError):
    def __init__(self, error: str, details: Optional[Any] = None):
        super().__init__(status_code=400, error=error, details=details)


class MissingContentLinkError(ValidationError):
    def __init__(self):
        super().__init__("Content link required")


class MissingIframeUrlError(ValidationError):
    def __init__(self):
        super().__init__("iframe URL required")


class CatalogFetchError(ScraperAPIError):
    def __init__(self, details: str):
        super().__init__(status_code=500, error="Failed to fetch catalog", details=details)


class ContentFetchError(ScraperAPIError):
    def __init__(self, details: str):
        super().__init__(status_code=500, error="Failed to extract content details", details=details)


class LinkExtractionError(ScraperAPIError):
    def __init__(self, details: str):
        super().__init__(status_code=500, error="Failed to extract link", details=details)
