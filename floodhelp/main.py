"""Flood Help — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floodhelp.adapters.persistence.database import create_tables, engine
from floodhelp.config import settings
from floodhelp.infrastructure.api.routes_geocode import router as geocode_router
from floodhelp.infrastructure.api.routes_health import router as health_router
from floodhelp.infrastructure.api.routes_reports import router as reports_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        await create_tables()
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Flood Help",
        description="Flood victim report intake, address geocoding, and dashboard queries",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the web frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")
    app.include_router(reports_router, prefix="/api")

    return app


app = create_app()
