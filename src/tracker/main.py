"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from .api.routes import artists, geocode, health
from .config import settings
from .services.catalog import ArtistCache, CatalogClient
from .services.geocoding import Geocoder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.refresh_on_startup:
        # the service refuses to start without an initial catalog
        count = await run_in_threadpool(app.state.artist_cache.refresh)
        logger.info(f"Initial catalog loaded with {count} artists")
    yield


def create_app(cache: ArtistCache | None = None, geocoder: Geocoder | None = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.artist_cache = cache if cache is not None else ArtistCache(CatalogClient())
    app.state.geocoder = geocoder if geocoder is not None else Geocoder()

    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "artists": f"{settings.api_prefix}/artists",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(artists.router, prefix=settings.api_prefix)
    app.include_router(geocode.router, prefix=settings.api_prefix)
    return app


app = create_app()
