"""
Test suite untuk response cache
"""

import base64

import pytest

from app.scraper import ResponseCache, catalog_cache_key, content_cache_key, links_cache_key


@pytest.mark.unit
class TestResponseCache:
    """Test TTL behaviour of ResponseCache"""

    @pytest.fixture
    def cache(self, fake_clock):
        return ResponseCache(ttl_seconds=3600, clock=fake_clock)

    def test_default_ttl(self):
        assert ResponseCache().ttl_seconds == 3600

    def test_set_and_get(self, cache):
        cache.set("catalog_1__all", {"items": []})

        assert cache.get("catalog_1__all") == {"items": []}
        assert "catalog_1__all" in cache

    def test_missing_key(self, cache):
        assert cache.get("nope") is None
        assert "nope" not in cache

    def test_entry_lives_until_ttl(self, cache, fake_clock):
        cache.set("key", "value")

        fake_clock.advance(3599)
        assert cache.get("key") == "value"

        fake_clock.advance(1)
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_set_restarts_ttl(self, cache, fake_clock):
        cache.set("key", "old")
        fake_clock.advance(3000)
        cache.set("key", "new")
        fake_clock.advance(3000)

        assert cache.get("key") == "new"

    def test_cleanup_expired(self, cache, fake_clock):
        cache.set("old", 1)
        fake_clock.advance(1800)
        cache.set("fresh", 2)
        fake_clock.advance(1800)

        removed = cache.cleanup_expired()

        assert removed == 1
        assert cache.get("fresh") == 2
        assert len(cache) == 1

    def test_no_size_bound(self, cache):
        for i in range(5000):
            cache.set(f"key_{i}", i)

        assert len(cache) == 5000
        assert cache.get("key_0") == 0

    def test_statistics(self, cache, fake_clock):
        cache.set("key", "value")
        cache.get("key")
        cache.get("missing")
        fake_clock.advance(3600)
        cache.get("key")

        stats = cache.get_cache_statistics()

        assert stats["total_requests"] == 3
        assert stats["hit_rate"] == pytest.approx(100 / 3)
        assert stats["size"] == 0
        assert stats["ttl_seconds"] == 3600
        assert stats["cache_stats"]["expired"] == 1
        assert stats["cache_stats"]["sets"] == 1

    def test_empty_statistics(self, cache):
        stats = cache.get_cache_statistics()

        assert stats["total_requests"] == 0
        assert stats["hit_rate"] == 0


@pytest.mark.unit
class TestCacheKeys:
    """Test deterministic cache key builders"""

    def test_catalog_key(self):
        assert catalog_cache_key(2, "dark", "series") == "catalog_2_dark_series"
        assert catalog_cache_key(1, "", "all") == "catalog_1__all"

    def test_content_key_is_base64_of_link(self):
        link = "https://filmax.to/movie/inception-2010?lang=en"

        key = content_cache_key(link)

        assert key.startswith("content_")
        assert base64.b64decode(key[len("content_"):]).decode() == link

    def test_links_key_differs_from_content_key(self):
        url = "https://streamtape.example/embed/x"

        assert links_cache_key(url) != content_cache_key(url)
        assert links_cache_key(url) == links_cache_key(url)
