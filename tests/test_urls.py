"""
Test suite untuk URL helpers
"""

import pytest

from app.scraper.urls import absolutize, build_catalog_url, encode_url_key, is_absolute


BASE_URL = "https://filmax.to"


@pytest.mark.unit
class TestBuildCatalogUrl:

    @pytest.mark.parametrize("page,search,content_type,expected", [
        (1, "", "all", "https://filmax.to"),
        (1, "", "movies", "https://filmax.to/movies"),
        (3, "", "series", "https://filmax.to/series?page=3"),
        (2, "", "all", "https://filmax.to?page=2"),
        (1, "the matrix", "all", "https://filmax.to/search?q=the%20matrix"),
        (2, "the matrix", "series", "https://filmax.to/search?q=the%20matrix&page=2"),
    ])
    def test_urls(self, page, search, content_type, expected):
        assert build_catalog_url(BASE_URL, page, search, content_type) == expected

    def test_trailing_slash_on_base(self):
        assert build_catalog_url("https://filmax.to/", 1, "", "movies") == "https://filmax.to/movies"

    def test_search_is_encoded(self):
        assert build_catalog_url(BASE_URL, 1, "a&b/c", "all") == "https://filmax.to/search?q=a%26b%2Fc"


@pytest.mark.unit
class TestAbsolutize:

    @pytest.mark.parametrize("url,expected", [
        ("https://img.example/a.jpg", "https://img.example/a.jpg"),
        ("http://img.example/a.jpg", "http://img.example/a.jpg"),
        ("/posters/a.jpg", "https://filmax.to/posters/a.jpg"),
        ("posters/a.jpg", "https://filmax.to/posters/a.jpg"),
        ("//cdn.example/a.jpg", "https://cdn.example/a.jpg"),
        ("  /padded.jpg ", "https://filmax.to/padded.jpg"),
        ("", ""),
        (None, ""),
    ])
    def test_absolutize(self, url, expected):
        assert absolutize(url, BASE_URL) == expected

    def test_is_absolute(self):
        assert is_absolute("https://filmax.to/x")
        assert not is_absolute("/x")
        assert not is_absolute("javascript:void(0)")

    def test_encode_url_key(self):
        assert encode_url_key("https://a.b") == "aHR0cHM6Ly9hLmI="
