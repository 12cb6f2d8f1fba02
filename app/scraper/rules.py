"""
Selector fallback chains

Every field the extractor reads is described by an ordered tuple of rules.
A rule is a pure function ``node -> Optional[value]``; the first rule that
returns a non-empty value wins.
"""

import re
from typing import Callable, Iterable, List, Optional

from bs4 import Tag


Rule = Callable[[Tag], Optional[object]]

YEAR_PATTERN = re.compile(r'\b(\d{4})\b')
NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?')


def _clean_text(element: Tag) -> str:
    return element.get_text(" ", strip=True)


def text_of(selector: str) -> Rule:
    """Trimmed text of the first element matching ``selector``"""
    def rule(node: Tag) -> Optional[str]:
        element = node.select_one(selector)
        if element is None:
            return None
        return _clean_text(element) or None
    rule.__name__ = f"text_of({selector!r})"
    return rule


def attr_of(selector: str, attribute: str) -> Rule:
    """Attribute of the first element matching ``selector`` that carries it"""
    def rule(node: Tag) -> Optional[str]:
        for element in node.select(selector):
            value = element.get(attribute)
            if isinstance(value, list):
                value = " ".join(value)
            if value and value.strip():
                return value.strip()
        return None
    rule.__name__ = f"attr_of({selector!r}, {attribute!r})"
    return rule


def texts_of(selector: str) -> Rule:
    """Trimmed, non-empty texts of every element matching ``selector``"""
    def rule(node: Tag) -> Optional[List[str]]:
        texts = [_clean_text(element) for element in node.select(selector)]
        texts = [text for text in texts if text]
        return texts or None
    rule.__name__ = f"texts_of({selector!r})"
    return rule


def first_match(node: Tag, rules: Iterable[Rule]):
    """Apply rules in order and return the first non-empty value"""
    for rule in rules:
        value = rule(node)
        if value:
            return value
    return None


def parse_year(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    match = YEAR_PATTERN.search(text)
    return int(match.group(1)) if match else None


def parse_rating(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    match = NUMBER_PATTERN.search(text)
    return float(match.group(0)) if match else None


# Catalog listing fields, applied to each container element
CATALOG_CONTAINER_SELECTORS = ('.movie-item', '.series-item', '.content-item')
SERIES_MARKER_CLASS = 'series-item'

CATALOG_FIELD_RULES = {
    'title': (text_of('.title'), text_of('h3'), text_of('.movie-title')),
    'poster': (attr_of('img', 'src'), attr_of('img', 'data-src')),
    'link': (attr_of('a', 'href'),),
    'year': (text_of('.year'), text_of('.release-year')),
    'rating': (text_of('.rating'), text_of('.imdb-rating')),
    'synopsis': (text_of('.synopsis'), text_of('.description')),
    'genres': (texts_of('.genre'),),
}

PAGINATION_SELECTORS = ('.pagination a', '.pagination li', '.page-numbers')

# Detail page fields, applied to the whole document
DETAIL_FIELD_RULES = {
    'title': (text_of('.movie-title'), text_of('.series-title'), text_of('h1')),
    'synopsis': (text_of('.synopsis'), text_of('.description'), text_of('.plot')),
    'poster': (
        attr_of('.poster img', 'src'),
        attr_of('.movie-poster img', 'src'),
        attr_of('.poster img', 'data-src'),
        attr_of('.movie-poster img', 'data-src'),
    ),
    'year': (text_of('.year'), text_of('.release-year')),
    'duration': (text_of('.duration'), text_of('.runtime')),
    'genres': (texts_of('.genre'),),
    'rating': (text_of('.rating'), text_of('.imdb-rating')),
}

# Player page anchors worth offering as downloads
DOWNLOAD_ANCHOR_SELECTOR = 'a[href*=".mp4"], a[href*=".mkv"], a[download]'
