"""
Custom validators untuk request validation
"""
from typing import Optional

from app.api.exceptions import ValidationError
from app.scraper.urls import is_absolute


class UrlValidator:
    """Validator untuk URL parameters"""

    @staticmethod
    def validate_absolute_url(url: Optional[str], missing_error: ValidationError, field_name: str) -> str:
        """Require a non-empty absolute http(s) URL"""
        if not url or not url.strip():
            raise missing_error

        url = url.strip()
        if not is_absolute(url):
            raise ValidationError(
                f"{field_name} must be an absolute http(s) URL",
                details=url
            )
        return url
