"""
Pydantic models for the Artisan Geo service.

These models define the value types used by the geometry helpers and the
request/response structures for the HTTP API.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


# -----------------------------------------------------------------------------
# Core Geometry Models
# -----------------------------------------------------------------------------


class GeoPoint(BaseModel):
    """
    A latitude/longitude pair in degrees.

    Ranges are not enforced here; use is_valid_coordinates() before trusting
    a point built from untrusted input.
    """

    lat: float
    lon: float


class Location(BaseModel):
    """A point on Earth (WGS84 coordinates) supplied by a client."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class BoundingBox(BaseModel):
    """Lat/lon box used to pre-filter search candidates. Not clamped."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


# -----------------------------------------------------------------------------
# Artisan Models
# -----------------------------------------------------------------------------


class ArtisanRequest(BaseModel):
    """Request to create or replace an artisan listing."""

    name: str = Field(..., min_length=1, max_length=128)
    category: str = Field(..., min_length=1, max_length=64)
    rating: float = Field(default=0, ge=0, le=5)
    verified: bool = False
    location: Location


class Artisan(BaseModel):
    """An artisan listing with a service location."""

    id: str
    name: str
    category: str
    rating: float
    verified: bool
    location: Location
    created: datetime
    updated: datetime


class ArtisanResponse(BaseModel):
    """Response wrapping a single artisan."""

    status: Literal["ok"] = "ok"
    artisan: Artisan


class DeleteResponse(BaseModel):
    """Response after an artisan is removed."""

    status: Literal["deleted"] = "deleted"
    id: str


# -----------------------------------------------------------------------------
# Search Models
# -----------------------------------------------------------------------------


class NearbySearchRequest(BaseModel):
    """Request to search for artisans near a location."""

    location: Location
    radius_km: float | None = Field(
        default=None, gt=0, description="Search radius in kilometers"
    )
    category: str | None = None
    min_rating: float | None = Field(default=None, ge=0, le=5)


class NearbyResult(BaseModel):
    """A single nearby search result."""

    id: str
    name: str
    category: str
    rating: float
    location: Location
    distance: float = Field(description="Distance from query point in kilometers")
    distance_display: str


class NearbySearchResponse(BaseModel):
    """Response from a nearby search."""

    status: Literal["ok"] = "ok"
    radius_km: float
    bounding_box: BoundingBox
    results: list[NearbyResult]


# -----------------------------------------------------------------------------
# Geometry Endpoint Models
# -----------------------------------------------------------------------------


class DistanceResponse(BaseModel):
    """Distance between two points."""

    distance: float = Field(description="Distance in kilometers")
    display: str


class ParseResponse(BaseModel):
    """Result of parsing a coordinate string."""

    valid: bool
    point: GeoPoint | None = None

