"""
FastAPI application factory dan configuration
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.config import settings
from app.api.dependencies import AppState
from app.api.exceptions import ScraperAPIError
from app.api.middleware import RequestLoggingMiddleware
from app.api.routes import cache, catalog, content, health, links, root


# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler untuk startup dan shutdown"""
    # Startup
    app_state: AppState = app.state.app_state
    logger.info(f"Scraper API ready, target site {app_state.scrape_config.base_url}")

    yield

    # Shutdown: in-flight requests are not drained
    logger.info("Shutting down...")
    await app_state.shutdown()
    logger.info("Application shutdown complete")


async def scraper_error_handler(request: Request, exc: ScraperAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_payload()))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"error": "Invalid request parameters", "details": exc.errors()})
    )


def create_app(app_state: AppState = None) -> FastAPI:
    """Factory function untuk membuat FastAPI app"""
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )
    app.state.app_state = app_state or AppState(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Error payloads
    app.add_exception_handler(ScraperAPIError, scraper_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(content.router)
    app.include_router(links.router)
    app.include_router(cache.router)

    return app
