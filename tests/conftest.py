"""
Shared fixtures untuk test suite
"""

import pytest
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.api.config import settings
from app.api.dependencies import AppState
from app.scraper import BrowserState, RenderedDocument, ResponseCache


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeBrowser:
    """Stands in for BrowserManager; serves canned HTML per URL"""

    def __init__(self):
        self.pages = {}
        self.default_html = "<html><body></body></html>"
        self.response_urls = []
        self.error = None
        self.calls = []
        self.closed = False
        self.state = BrowserState.UNINITIALIZED

    async def render(self, url, wait_policy=None, capture_responses=False, settle_ms=0):
        self.calls.append({
            'url': url,
            'wait_policy': wait_policy,
            'capture_responses': capture_responses,
            'settle_ms': settle_ms
        })
        if self.error is not None:
            raise self.error

        return RenderedDocument(
            url=url,
            html=self.pages.get(url, self.default_html),
            response_urls=list(self.response_urls) if capture_responses else []
        )

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_browser():
    return FakeBrowser()


@pytest.fixture
def app_state(fake_browser, fake_clock):
    return AppState(
        settings,
        browser=fake_browser,
        cache=ResponseCache(ttl_seconds=3600, clock=fake_clock)
    )


@pytest.fixture
def client(app_state):
    app = create_app(app_state)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def base_url(app_state):
    return app_state.scrape_config.base_url


@pytest.fixture
def catalog_html():
    return """
    <html><body>
      <div class="content-list">
        <div class="movie-item">
          <a href="/movie/inception-2010"><img data-src="/posters/inception.jpg"></a>
          <h3>Inception</h3>
          <span class="year">2010</span>
          <span class="imdb-rating">8.8</span>
          <p class="description">A thief who steals corporate secrets.</p>
          <span class="genre">Action</span>
          <span class="genre">Sci-Fi</span>
        </div>
        <div class="series-item">
          <a href="https://filmax.to/series/dark"><img src="https://img.example/dark.jpg"></a>
          <div class="title">Dark</div>
          <span class="release-year">(2017)</span>
        </div>
        <div class="content-item">
          <span class="title">No link here</span>
        </div>
      </div>
      <ul class="pagination">
        <li><a href="?page=2">2</a></li>
        <li><a href="?page=7">Last</a></li>
      </ul>
    </body></html>
    """


@pytest.fixture
def detail_html():
    return r"""
    <html><body>
      <h1>Page heading</h1>
      <div class="movie-title">Interstellar</div>
      <div class="plot">Explorers travel through a wormhole.</div>
      <div class="poster"><img src="/img/interstellar.jpg"></div>
      <span class="release-year">2014</span>
      <span class="runtime">169 min</span>
      <span class="genre">Adventure</span>
      <span class="rating">8.7/10</span>
      <iframe src="https://streamtape.example/embed/x"></iframe>
      <iframe src="//mixdrop.co/e/abc"></iframe>
      <iframe src="https://youtube.com/embed/trailer"></iframe>
      <script>var sources = {"hls": "https:\/\/cdn.example\/video\/a.m3u8", "file": "https://cdn.example/video/b.mp4"};</script>
      <script src="https://cdn.example/player.js"></script>
    </body></html>
    """


@pytest.fixture
def player_html():
    return """
    <html><body>
      <a href="/dl/movie.mkv">Download MKV</a>
      <a href="https://files.example/movie.mp4?token=1">Download MP4</a>
      <a download href="blob:https://player.example/123">Save</a>
      <a download>Broken</a>
      <a href="/about">About</a>
    </body></html>
    """
