"""geosync — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from geosync.application.use_cases.geocoding_policy import IntervalLimiter
from geosync.config import settings
from geosync.infrastructure.api.routes_health import router as health_router
from geosync.infrastructure.api.routes_sync import router as sync_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Splynx API: %s", settings.splynx_base_url)
    if not settings.crm_configured:
        logger.warning("Splynx API key/secret not set; sync runs will fail to list customers")
    if not settings.google_maps_api_key:
        logger.info("No Google Maps API key; Nominatim is the only geocoder")

    # One limiter per process: overlapping runs must still respect
    # Nominatim's one-request-per-second limit.
    app.state.nominatim_limiter = IntervalLimiter(min_interval=settings.nominatim_min_interval)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="geosync — Splynx service coordinate sync",
        description="Geocode internet services without coordinates and write them back to Splynx",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(sync_router, prefix="/api")

    return app


app = create_app()
