"""
Artisan Geo - proximity search for a service marketplace.

Finds verified artisans near a customer's location.
"""

import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artisan_geo import __version__
from artisan_geo.api import api_router
from artisan_geo.config import settings
from artisan_geo.database import close_database, init_database

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("artisan_geo")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the artisan database for the lifetime of the app."""
    logger.info(
        "Artisan Geo v%s using %s (radius default %s km, max %s km, %d results)",
        __version__,
        settings.database_path,
        settings.default_radius_km,
        settings.max_radius_km,
        settings.max_results,
    )
    init_database(settings.database_path)
    try:
        yield
    finally:
        close_database()
        logger.info("Database closed")


app = FastAPI(
    title="Artisan Geo",
    description="Nearby artisan search and distance utilities",
    version=__version__,
    lifespan=lifespan,
)

# Search is read-mostly and called from browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/", tags=["root"])
async def root():
    """Service name, version and search limits."""
    return {
        "name": "Artisan Geo",
        "version": __version__,
        "search": {
            "default_radius_km": settings.default_radius_km,
            "max_radius_km": settings.max_radius_km,
            "max_results": settings.max_results,
        },
    }


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "healthy"}


def run():
    """Entry point for the artisan-geo command."""
    parser = argparse.ArgumentParser(description="Serve the Artisan Geo API")
    parser.add_argument("-H", "--host", default=settings.host, help="Bind address")
    parser.add_argument("-p", "--port", type=int, default=settings.port, help="Listen port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("artisan_geo.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    run()
