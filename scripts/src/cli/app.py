#!/usr/bin/env python3
"""
CLI Application for the catalog scraper
"""

import asyncio
import json
import logging
from typing import Awaitable, Callable

import typer
from rich.console import Console
from rich.logging import RichHandler

from app.api.config import settings
from app.api.dependencies import AppState
from app.api.exceptions import MissingContentLinkError, MissingIframeUrlError, ScraperAPIError
from app.api.models import CatalogType
from app.api.services import CatalogService, ContentService, LinkService
from app.api.validators import UrlValidator
from scripts.src.cli.display import Display

app = typer.Typer(
    name="catalog-scraper",
    help="🎬 Catalog Scraper - movie/series listings through a headless browser",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def setup_logging(log_level: str = "INFO"):
    """Setup logging configuration with Rich handler"""
    logging.getLogger().handlers.clear()
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _scrape(operation: Callable[[AppState], Awaitable[dict]]) -> dict:
    """Run one scrape with a fresh app state and always close the browser"""
    async def runner():
        app_state = AppState(settings)
        try:
            return await operation(app_state)
        finally:
            await app_state.shutdown()

    try:
        return asyncio.run(runner())
    except ScraperAPIError as e:
        Display.show_error(e.error, e.details)
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = settings.HOST,
    port: int = settings.PORT,
    reload: bool = settings.RELOAD,
):
    """Start the HTTP API"""
    import uvicorn

    uvicorn.run("main:app", host=host, port=port, reload=reload)


@app.command()
def catalog(
    page: int = typer.Option(1, min=1, help="Catalog page number"),
    search: str = typer.Option("", help="Search text"),
    content_type: CatalogType = typer.Option(CatalogType.ALL, "--type", help="Listing filter"),
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON"),
    log_level: str = "WARNING",
):
    """Scrape one catalog page"""
    setup_logging(log_level)

    result = _scrape(lambda state: CatalogService.get_catalog(
        state, page=page, search=search.strip(), content_type=content_type.value
    ))

    if json_output:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        Display.show_catalog(result)


@app.command()
def content(
    link: str = typer.Argument(..., help="Absolute URL of the detail page"),
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON"),
    log_level: str = "WARNING",
):
    """Scrape a movie or series detail page"""
    setup_logging(log_level)

    try:
        link = UrlValidator.validate_absolute_url(link, MissingContentLinkError(), "link")
    except ScraperAPIError as e:
        Display.show_error(e.error, e.details)
        raise typer.Exit(2)

    result = _scrape(lambda state: ContentService.get_content(state, link=link))

    if json_output:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        Display.show_content(result)


@app.command("extract-link")
def extract_link(
    iframe_url: str = typer.Argument(..., help="Absolute URL of the embedded player"),
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON"),
    log_level: str = "WARNING",
):
    """Collect media and download URLs from an embedded player page"""
    setup_logging(log_level)

    try:
        iframe_url = UrlValidator.validate_absolute_url(iframe_url, MissingIframeUrlError(), "iframeUrl")
    except ScraperAPIError as e:
        Display.show_error(e.error, e.details)
        raise typer.Exit(2)

    result = _scrape(lambda state: LinkService.extract_links(state, iframe_url=iframe_url))

    if json_output:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        Display.show_extracted_links(result)


if __name__ == "__main__":
    app()
