"""
Source code modules untuk catalog scraper scripts
"""

__version__ = "1.0.0"
