"""Geometry endpoints: distance, bounding box and coordinate parsing."""

from fastapi import APIRouter, HTTPException, Query

from artisan_geo.geo import calculate_distance, format_distance, get_bounding_box, parse_coordinates
from artisan_geo.models import BoundingBox, DistanceResponse, GeoPoint, ParseResponse
from artisan_geo.validation import validate_location_string

router = APIRouter(prefix="/geo")


def _location_param(value: str, name: str) -> GeoPoint:
    try:
        return validate_location_string(value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"{name}: {e}")


@router.get("/distance", response_model=DistanceResponse)
async def get_distance(
    origin: str = Query(..., alias="from", description="Start point as 'lat, lon'"),
    destination: str = Query(..., alias="to", description="End point as 'lat, lon'"),
) -> DistanceResponse:
    """Great-circle distance between two points in kilometers."""
    start = _location_param(origin, "from")
    end = _location_param(destination, "to")

    distance = calculate_distance(start.lat, start.lon, end.lat, end.lon)
    return DistanceResponse(distance=distance, display=format_distance(distance))


@router.get("/bbox", response_model=BoundingBox)
async def get_bbox(
    near: str = Query(..., description="Center as 'lat, lon'"),
    radius_km: float = Query(..., gt=0),
) -> BoundingBox:
    """
    Bounding box around a point.

    The box is not clamped to valid coordinate ranges.
    """
    center = _location_param(near, "near")
    return get_bounding_box(center.lat, center.lon, radius_km)


@router.get("/parse", response_model=ParseResponse)
async def parse(text: str = Query(..., max_length=256)) -> ParseResponse:
    """
    Parse a coordinate string.

    Unparseable input is reported with valid=false rather than an error.
    """
    point = parse_coordinates(text)
    return ParseResponse(valid=point is not None, point=point)
