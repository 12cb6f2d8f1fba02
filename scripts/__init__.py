"""
Scripts package untuk catalog scraper

Package ini berisi CLI tools untuk menjalankan server dan scraping ad-hoc.
"""

__version__ = "1.0.0"
