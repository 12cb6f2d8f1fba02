"""
Configuration management untuk API
"""
import os
from typing import Optional

from dotenv import load_dotenv

from app.scraper.config import DEFAULT_USER_AGENT, ScrapeConfig

load_dotenv()


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings dari environment variables"""

    # Server configuration
    PORT: int = int(os.getenv("PORT", 3001))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    RELOAD: bool = _get_bool("RELOAD", "false")

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Target site
    SITE_BASE_URL: str = os.getenv("SITE_BASE_URL", "https://filmax.to")

    # Cache configuration
    CACHE_TTL: int = int(os.getenv("CACHE_TTL", 3600))

    # Browser configuration
    BROWSER_HEADLESS: bool = _get_bool("BROWSER_HEADLESS", "true")
    BROWSER_EXECUTABLE_PATH: Optional[str] = os.getenv("BROWSER_EXECUTABLE_PATH") or None
    USER_AGENT: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    NAVIGATION_TIMEOUT_MS: int = int(os.getenv("NAVIGATION_TIMEOUT_MS", 30000))
    SELECTOR_TIMEOUT_MS: int = int(os.getenv("SELECTOR_TIMEOUT_MS", 10000))
    LINK_SETTLE_MS: int = int(os.getenv("LINK_SETTLE_MS", 3000))

    # API configuration
    API_TITLE: str = "Catalog Scraper API"
    API_DESCRIPTION: str = "Scrapes movie and series listings, detail pages and player links through a headless browser"
    API_VERSION: str = "1.0.0"

    # CORS configuration
    CORS_ORIGINS: list = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

    def scrape_config(self) -> ScrapeConfig:
        """Build scraper configuration from these settings"""
        return ScrapeConfig(
            base_url=self.SITE_BASE_URL,
            headless=self.BROWSER_HEADLESS,
            executable_path=self.BROWSER_EXECUTABLE_PATH,
            user_agent=self.USER_AGENT,
            navigation_timeout_ms=self.NAVIGATION_TIMEOUT_MS,
            selector_timeout_ms=self.SELECTOR_TIMEOUT_MS,
            link_settle_ms=self.LINK_SETTLE_MS,
            cache_ttl=self.CACHE_TTL
        )


# Global settings instance
settings = Settings()
