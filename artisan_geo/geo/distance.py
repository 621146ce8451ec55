"""Distance calculations using the Haversine formula."""

import math

from artisan_geo.models import GeoPoint

from .constants import EARTH_RADIUS_KM
from .coordinates import is_valid_coordinates


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round to ``ndigits`` decimals with ties going up.

    Unlike round(), 2.5 becomes 3 and 0.125 at two digits becomes 0.13.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Inputs are not range-checked; NaN or out-of-range degrees give a
    meaningless result rather than an error.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometers, rounded to 2 decimal places
    """
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    lambda1 = to_radians(lon1)
    lambda2 = to_radians(lon2)

    # math.sin/cos reject infinities, including huge degrees that overflow
    # when converted; report NaN like any other bad input
    if not all(math.isfinite(v) for v in (phi1, phi2, lambda1, lambda2)):
        return math.nan

    dlat = phi2 - phi1
    dlon = lambda2 - lambda1

    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2

    # Float error can push a just outside [0, 1] for antipodal points
    if a > 1:
        a = 1.0
    elif a < 0:
        a = 0.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_KM * c, 2)


def is_within_radius(
    center_lat: float,
    center_lon: float,
    point_lat: float,
    point_lon: float,
    radius_km: float,
) -> bool:
    """
    Test if a point lies within a circle around a center point.

    The boundary is inclusive and compared after the 2-decimal rounding
    applied by calculate_distance().
    """
    distance = calculate_distance(center_lat, center_lon, point_lat, point_lon)
    return distance <= radius_km


def distance_between(start: GeoPoint, end: GeoPoint) -> float | None:
    """
    Checked variant of calculate_distance() for untrusted points.

    Returns:
        Distance in kilometers, or None if either point is out of range
    """
    if not is_valid_coordinates(start.lat, start.lon):
        return None
    if not is_valid_coordinates(end.lat, end.lon):
        return None
    return calculate_distance(start.lat, start.lon, end.lat, end.lon)
