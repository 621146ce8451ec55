"""API endpoints for the Artisan Geo service."""

from fastapi import APIRouter

from . import artisans, geo, search

# Create a combined router for all API endpoints
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(artisans.router, tags=["artisans"])
api_router.include_router(search.router, tags=["search"])
api_router.include_router(geo.router, tags=["geometry"])
