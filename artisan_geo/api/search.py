"""Nearby search endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query

from artisan_geo.config import settings
from artisan_geo.database import get_cursor
from artisan_geo.geo import (
    bounding_box_crosses_antimeridian,
    bounding_box_crosses_pole,
    calculate_distance,
    format_distance,
    get_bounding_box,
    search_bounding_box,
)
from artisan_geo.models import (
    BoundingBox,
    Location,
    NearbyResult,
    NearbySearchRequest,
    NearbySearchResponse,
)
from artisan_geo.validation import validate_location_string

logger = logging.getLogger("artisan_geo.search")

router = APIRouter(prefix="/search")


@router.post("/nearby", response_model=NearbySearchResponse)
async def search_nearby(request: NearbySearchRequest) -> NearbySearchResponse:
    """
    Search for verified artisans near a location.

    This endpoint is public. Results are sorted by distance (closest first),
    then by rating.
    """
    radius_km = _resolve_radius(request.radius_km)
    return find_nearby_artisans(
        request.location,
        radius_km,
        category=request.category,
        min_rating=request.min_rating,
    )


@router.get("/nearby", response_model=NearbySearchResponse)
async def search_nearby_query(
    near: str = Query(..., description="Search center as 'lat, lon'"),
    radius_km: float | None = Query(default=None, gt=0),
    category: str | None = None,
    min_rating: float | None = Query(default=None, ge=0, le=5),
) -> NearbySearchResponse:
    """
    Search for verified artisans near a location given as a query string.

    Same as POST /search/nearby, for links and simple clients.
    """
    try:
        point = validate_location_string(near)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return find_nearby_artisans(
        Location(lat=point.lat, lon=point.lon),
        _resolve_radius(radius_km),
        category=category,
        min_rating=min_rating,
    )


def _resolve_radius(radius_km: float | None) -> float:
    """Apply the default radius and enforce the server maximum."""
    if radius_km is None:
        return settings.default_radius_km

    if radius_km > settings.max_radius_km:
        raise HTTPException(
            status_code=400,
            detail=f"radius exceeds maximum of {settings.max_radius_km} km",
        )
    return radius_km


def find_nearby_artisans(
    location: Location,
    radius_km: float,
    category: str | None = None,
    min_rating: float | None = None,
) -> NearbySearchResponse:
    """
    Find verified artisans within radius_km of a location.

    Args:
        location: Search center
        radius_km: Search radius in kilometers
        category: Only return artisans in this category
        min_rating: Only return artisans rated at least this high

    Returns:
        Search response with results sorted by distance
    """
    # Reported box, plus a wider one that cannot drop in-radius rows
    bbox = get_bounding_box(location.lat, location.lon, radius_km)
    query_box = search_bounding_box(location.lat, location.lon, radius_km)

    clauses = ["verified = 1", "lat BETWEEN ? AND ?"]
    params: list = [query_box.min_lat, query_box.max_lat]

    lon_clause, lon_params = _longitude_filter(query_box)
    if lon_clause:
        clauses.append(lon_clause)
        params.extend(lon_params)

    if category is not None:
        clauses.append("category = ?")
        params.append(category)
    if min_rating is not None:
        clauses.append("rating >= ?")
        params.append(min_rating)

    with get_cursor() as cursor:
        cursor.execute(
            f"SELECT * FROM artisans WHERE {' AND '.join(clauses)}",
            params,
        )
        rows = cursor.fetchall()

    # Filter by exact distance (bounding box is just an approximation)
    results = []
    for row in rows:
        # Same inclusive check as is_within_radius(), on the one distance
        distance = calculate_distance(location.lat, location.lon, row["lat"], row["lon"])
        if distance > radius_km:
            continue

        results.append(
            NearbyResult(
                id=row["id"],
                name=row["name"],
                category=row["category"],
                rating=row["rating"],
                location=Location(lat=row["lat"], lon=row["lon"]),
                distance=distance,
                distance_display=format_distance(distance),
            )
        )

    logger.debug(
        "Nearby search at (%s, %s) r=%skm: %d candidates, %d within radius",
        location.lat,
        location.lon,
        radius_km,
        len(rows),
        len(results),
    )

    # Closest first, higher rating breaks ties
    results.sort(key=lambda r: (r.distance, -r.rating))

    # Limit results
    results = results[: settings.max_results]

    return NearbySearchResponse(radius_km=radius_km, bounding_box=bbox, results=results)


def _longitude_filter(bbox: BoundingBox) -> tuple[str | None, list[float]]:
    """
    Build the SQL longitude condition for a bounding box.

    Stored longitudes are in [-180, 180], but the box is not clamped. A box
    past a pole or spanning the whole circle cannot narrow longitude at all;
    a box past the antimeridian wraps onto the other side.
    """
    if bounding_box_crosses_pole(bbox) or bbox.max_lon - bbox.min_lon >= 360:
        return None, []

    if not bounding_box_crosses_antimeridian(bbox):
        return "lon BETWEEN ? AND ?", [bbox.min_lon, bbox.max_lon]

    if bbox.min_lon < -180:
        return "(lon >= ? OR lon <= ?)", [bbox.min_lon + 360, bbox.max_lon]
    return "(lon >= ? OR lon <= ?)", [bbox.min_lon, bbox.max_lon - 360]
