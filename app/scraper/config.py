"""
Configuration settings for the scraper
"""

from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class ScrapeConfig:
    """Configuration class for scraper settings"""
    # Target site
    base_url: str = "https://filmax.to"

    # Browser settings
    headless: bool = True
    executable_path: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1920
    viewport_height: int = 1080
    launch_args: List[str] = field(default_factory=lambda: [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',
        '--disable-accelerated-2d-canvas',
        '--no-first-run',
        '--no-zygote',
        '--disable-gpu'
    ])

    # Timing (milliseconds)
    navigation_timeout_ms: int = 30000
    selector_timeout_ms: int = 10000
    link_settle_ms: int = 3000

    # Caching settings
    cache_ttl: int = 60 * 60
