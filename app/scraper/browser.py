"""
Rendering gateway: one shared headless Chromium, one isolated context per render
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from playwright.async_api import (
    Browser,
    Error as PlaywrightError,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from .config import ScrapeConfig
from .exceptions import RenderError


logger = logging.getLogger(__name__)


class BrowserState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass
class WaitPolicy:
    """How long to wait before reading the rendered HTML"""
    wait_until: str = "networkidle"
    selector: Optional[str] = None
    selector_timeout_ms: int = 10000

    @classmethod
    def network_idle(cls) -> "WaitPolicy":
        return cls(wait_until="networkidle")

    @classmethod
    def for_selector(cls, selector: str, timeout_ms: int = 10000, wait_until: str = "networkidle") -> "WaitPolicy":
        return cls(wait_until=wait_until, selector=selector, selector_timeout_ms=timeout_ms)


@dataclass
class RenderedDocument:
    url: str
    html: str
    response_urls: List[str] = field(default_factory=list)


class BrowserManager:
    """Owns the lazily launched browser shared by every request.

    ``ensure_browser`` is single-flight: concurrent first callers wait on the
    same launch instead of starting browsers of their own. Each ``render``
    opens its own browser context, so pages never share cookies or storage.
    """

    def __init__(self, config: ScrapeConfig = None):
        self.config = config or ScrapeConfig()
        self.state = BrowserState.UNINITIALIZED
        self.launch_count = 0

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return (
            self.state is BrowserState.READY
            and self._browser is not None
            and self._browser.is_connected()
        )

    async def ensure_browser(self) -> Browser:
        """Return the shared browser, launching it on first use"""
        if self.is_ready:
            return self._browser

        async with self._lock:
            # Another coroutine may have finished the launch while we waited
            if self.is_ready:
                return self._browser

            if self._browser is not None:
                logger.warning("Browser disconnected, launching a new instance")
                await self._shutdown()

            self.state = BrowserState.INITIALIZING
            logger.info("Launching headless Chromium...")

            try:
                self._playwright, self._browser = await self._launch()
            except Exception as e:
                self.state = BrowserState.UNINITIALIZED
                logger.error(f"Browser launch failed: {e}")
                raise RenderError(f"Failed to launch browser: {e}") from e

            self.state = BrowserState.READY
            self.launch_count += 1
            logger.info("Browser ready")
            return self._browser

    async def _launch(self) -> Tuple[Playwright, Browser]:
        playwright = await async_playwright().start()

        launch_options = {
            'headless': self.config.headless,
            'args': list(self.config.launch_args),
        }
        if self.config.executable_path:
            launch_options['executable_path'] = self.config.executable_path

        try:
            browser = await playwright.chromium.launch(**launch_options)
        except Exception:
            await playwright.stop()
            raise

        return playwright, browser

    async def render(
        self,
        url: str,
        wait_policy: WaitPolicy = None,
        capture_responses: bool = False,
        settle_ms: int = 0
    ) -> RenderedDocument:
        """Navigate to ``url`` in a fresh context and return the rendered HTML"""
        wait_policy = wait_policy or WaitPolicy.network_idle()
        browser = await self.ensure_browser()

        response_urls: List[str] = []
        context = None

        try:
            context = await browser.new_context(
                user_agent=self.config.user_agent,
                viewport={
                    'width': self.config.viewport_width,
                    'height': self.config.viewport_height
                }
            )
            page = await context.new_page()

            if capture_responses:
                page.on("response", lambda response: response_urls.append(response.url))

            await page.goto(
                url,
                wait_until=wait_policy.wait_until,
                timeout=self.config.navigation_timeout_ms
            )

            if wait_policy.selector:
                await page.wait_for_selector(
                    wait_policy.selector,
                    timeout=wait_policy.selector_timeout_ms
                )

            if settle_ms:
                await page.wait_for_timeout(settle_ms)

            html = await page.content()

        except PlaywrightTimeoutError as e:
            logger.error(f"Render timed out for {url}: {e}")
            raise RenderError(f"Timed out while rendering {url}: {e}", url=url) from e
        except PlaywrightError as e:
            if not browser.is_connected():
                logger.error(f"Browser disconnected while rendering {url}")
                raise RenderError(f"Browser disconnected while rendering {url}", url=url) from e
            logger.error(f"Render failed for {url}: {e}")
            raise RenderError(f"Failed to render {url}: {e}", url=url) from e
        finally:
            if context is not None:
                try:
                    await context.close()
                except PlaywrightError as e:
                    logger.debug(f"Ignoring error while closing context for {url}: {e}")

        logger.debug(f"Rendered {url} ({len(html)} chars, {len(response_urls)} responses)")
        return RenderedDocument(url=url, html=html, response_urls=list(response_urls))

    async def close(self):
        """Best-effort shutdown of the browser and the Playwright driver"""
        async with self._lock:
            await self._shutdown()

    async def _shutdown(self):
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None
        self.state = BrowserState.UNINITIALIZED

        if browser is not None:
            try:
                await browser.close()
                logger.info("Browser closed")
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")

        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
