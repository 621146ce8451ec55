"""Bounding box computation for search pre-filtering."""

import math

from artisan_geo.models import BoundingBox

from .constants import EARTH_RADIUS_KM, KM_PER_DEGREE_LAT, POLE_COS_THRESHOLD, SEARCH_PAD_KM
from .distance import to_degrees, to_radians


def get_bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Compute a lat/lon box around a center point for a search radius.

    The box is a pre-filter for storage queries, not an exact boundary:
    it may include points farther than radius_km, which are removed by an
    exact distance check afterwards.

    Bounds are not clamped. Near the poles or the antimeridian they can
    fall outside [-90, 90] / [-180, 180] and callers must handle that.

    Args:
        lat: Center latitude in degrees
        lon: Center longitude in degrees
        radius_km: Search radius in kilometers

    Returns:
        Bounding box around the center
    """
    # One degree of latitude covers the same distance everywhere
    lat_delta = radius_km / KM_PER_DEGREE_LAT

    # Degrees of longitude shrink toward the poles. At a pole every
    # longitude is within reach, so the box spans the full circle.
    # Huge finite degrees overflow to inf in radians; cos() would raise
    lat_rad = to_radians(lat)
    cos_lat = math.cos(lat_rad) if math.isfinite(lat_rad) else math.nan
    if abs(cos_lat) < POLE_COS_THRESHOLD:
        lon_delta = 180.0
    else:
        lon_delta = radius_km / (KM_PER_DEGREE_LAT * cos_lat)

    return BoundingBox(
        min_lat=lat - lat_delta,
        max_lat=lat + lat_delta,
        min_lon=lon - lon_delta,
        max_lon=lon + lon_delta,
    )


def bounding_box_crosses_pole(box: BoundingBox) -> bool:
    """True if the box extends past either pole."""
    return box.max_lat > 90 or box.min_lat < -90


def bounding_box_crosses_antimeridian(box: BoundingBox) -> bool:
    """True if the box extends past +/-180 degrees longitude."""
    return box.max_lon > 180 or box.min_lon < -180


def search_bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Compute a box guaranteed to hold every point is_within_radius() accepts.

    get_bounding_box() uses a flat 111.32 km per degree, which is slightly
    longer than a degree on the 6371 km sphere used for distances, and its
    longitude span is too narrow at high latitudes. This box instead bounds
    the spherical cap exactly, for a radius widened by the 2-decimal rounding
    applied to distances.

    Args:
        lat: Center latitude in degrees
        lon: Center longitude in degrees
        radius_km: Search radius in kilometers

    Returns:
        Bounding box covering the whole search circle
    """
    # Rounded distances up to radius_km + 0.005 still pass the radius check
    angle = (radius_km + SEARCH_PAD_KM) / EARTH_RADIUS_KM
    lat_delta = to_degrees(angle)

    lat_rad = to_radians(lat)
    cos_lat = math.cos(lat_rad) if math.isfinite(lat_rad) else math.nan

    # The cap reaches a pole when sin(angle) >= cos(lat)
    if not math.isfinite(angle) or angle >= math.pi / 2 or abs(cos_lat) < POLE_COS_THRESHOLD:
        spread = math.inf
    else:
        spread = math.sin(angle) / abs(cos_lat)
    if spread >= 1:
        lon_delta = 180.0
    else:
        lon_delta = to_degrees(math.asin(spread))

    return BoundingBox(
        min_lat=lat - lat_delta,
        max_lat=lat + lat_delta,
        min_lon=lon - lon_delta,
        max_lon=lon + lon_delta,
    )
