"""
API routes module

Module ini berisi semua route handlers untuk API endpoints.
"""

from . import cache, catalog, content, health, links, root

# Import routers untuk mudah diakses
from .cache import router as cache_router
from .catalog import router as catalog_router
from .content import router as content_router
from .health import router as health_router
from .links import router as links_router
from .root import router as root_router

__all__ = [
    # Modules
    'cache',
    'catalog',
    'content',
    'health',
    'links',
    'root',

    # Routers
    'cache_router',
    'catalog_router',
    'content_router',
    'health_router',
    'links_router',
    'root_router'
]
