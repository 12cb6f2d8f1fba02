#!/usr/bin/env python3
"""
Catalog scraper CLI - Entry point
"""

from scripts.src.cli.app import app as cli_app


def main():
    cli_app()


if __name__ == "__main__":
    main()
