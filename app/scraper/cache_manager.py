"""
In-memory response cache with a fixed time-to-live
"""

import logging
import time
from collections import defaultdict
from typing import Any, Callable, Dict, Optional, Tuple

from .urls import encode_url_key


logger = logging.getLogger(__name__)


def catalog_cache_key(page: int, search: str, content_type: str) -> str:
    return f"catalog_{page}_{search}_{content_type}"


def content_cache_key(link: str) -> str:
    return f"content_{encode_url_key(link)}"


def links_cache_key(iframe_url: str) -> str:
    return f"links_{encode_url_key(iframe_url)}"


class ResponseCache:
    """Key-value store whose entries expire ``ttl_seconds`` after insertion.

    There is no size bound; memory is limited only by how many distinct keys
    are written within one TTL window. Expired entries are dropped lazily on
    read and by ``cleanup_expired``.
    """

    def __init__(self, ttl_seconds: int = 3600, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self.cache_stats = defaultdict(int)

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is not None:
            expires_at, value = entry
            if self._clock() < expires_at:
                self.cache_stats['hits'] += 1
                return value
            del self._entries[key]
            self.cache_stats['expired'] += 1

        self.cache_stats['misses'] += 1
        return None

    def set(self, key: str, value: Any):
        self._entries[key] = (self._clock() + self.ttl_seconds, value)
        self.cache_stats['sets'] += 1

    def __contains__(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and self._clock() < entry[0]

    def __len__(self) -> int:
        return len(self._entries)

    def cleanup_expired(self) -> int:
        """Remove expired entries and return how many were dropped"""
        now = self._clock()
        expired_keys = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]

        for key in expired_keys:
            del self._entries[key]

        if expired_keys:
            logger.info(f"Cache cleanup completed. Removed {len(expired_keys)} expired entries")
        return len(expired_keys)

    def get_cache_statistics(self) -> Dict:
        hits = self.cache_stats['hits']
        misses = self.cache_stats['misses']
        total_requests = hits + misses

        return {
            'total_requests': total_requests,
            'hit_rate': (hits / total_requests) * 100 if total_requests else 0,
            'size': len(self._entries),
            'ttl_seconds': self.ttl_seconds,
            'cache_stats': dict(self.cache_stats)
        }
