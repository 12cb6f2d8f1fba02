"""
FastAPI dependencies untuk dependency injection
"""
from fastapi import Depends, Request

from app.api.config import Settings, settings as default_settings
from app.scraper import BrowserManager, MarkupExtractor, ResponseCache


class AppState:
    """Process-scoped state shared by all requests.

    Built once per application (see ``create_app``) and torn down on
    shutdown. The browser itself is launched lazily on the first render.
    """

    def __init__(
        self,
        settings: Settings = None,
        browser: BrowserManager = None,
        cache: ResponseCache = None,
        extractor: MarkupExtractor = None
    ):
        self.settings = settings if settings is not None else default_settings
        scrape_config = self.settings.scrape_config()

        self.scrape_config = scrape_config
        self.browser = browser if browser is not None else BrowserManager(scrape_config)
        self.cache = cache if cache is not None else ResponseCache(ttl_seconds=scrape_config.cache_ttl)
        self.extractor = extractor if extractor is not None else MarkupExtractor(scrape_config.base_url)

    async def shutdown(self):
        await self.browser.close()


def get_app_state(request: Request) -> AppState:
    """Dependency untuk mendapatkan app state"""
    return request.app.state.app_state


def get_cache(app_state: AppState = Depends(get_app_state)) -> ResponseCache:
    return app_state.cache
