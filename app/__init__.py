"""
Main application package untuk catalog scraper API

Package ini berisi semua modul utama:
- api: FastAPI application dan routes
- scraper: headless browser rendering, markup extraction, dan response cache
"""

from . import api, scraper

__version__ = "1.0.0"

__all__ = [
    'api',
    'scraper',
    '__version__'
]
