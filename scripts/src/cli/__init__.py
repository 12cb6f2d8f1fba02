"""
Command-Line Interface (CLI) package untuk catalog scraper
"""

from scripts.src.cli.app import app as cli_app

__all__ = ["cli_app"]
