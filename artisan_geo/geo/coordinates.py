"""Coordinate validation, parsing and display formatting."""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

from artisan_geo.models import GeoPoint

# Leading decimal number of a token; trailing junk is ignored
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_ONE_DECIMAL = Decimal("0.1")
_FORMAT_CONTEXT = Context(prec=400)


def is_valid_coordinates(lat: float, lon: float) -> bool:
    """Check that lat is in [-90, 90] and lon in [-180, 180], inclusive."""
    return -90 <= lat <= 90 and -180 <= lon <= 180


def _parse_number(token: str) -> float | None:
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        return None
    return float(match.group(0))


def parse_coordinates(text: str) -> GeoPoint | None:
    """
    Parse a "lat, lon" string into a point.

    The first token is the latitude and the second the longitude (the
    reverse of GeoJSON's [lon, lat] order). Each token is read up to the end
    of its leading number, so "12.5km" parses as 12.5.

    Returns:
        The parsed point, or None if the text is malformed or out of range
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        return None

    lat = _parse_number(parts[0])
    lon = _parse_number(parts[1])

    if lat is None or lon is None or not is_valid_coordinates(lat, lon):
        return None

    return GeoPoint(lat=lat, lon=lon)


def _number_text(value: float) -> str:
    """Spell non-finite numbers as JavaScript clients print them."""
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def format_distance(distance_km: float) -> str:
    """
    Format a distance for display.

    Under one kilometer the distance is shown in whole meters ("500m"),
    otherwise in kilometers with one decimal ("2.5km").
    """
    # Imported here to avoid a cycle with distance.py
    from .distance import round_half_up

    if distance_km < 1:
        meters = round_half_up(distance_km * 1000)
        if not math.isfinite(meters):
            return f"{_number_text(meters)}m"
        return f"{int(meters)}m"

    if not math.isfinite(distance_km):
        return f"{_number_text(distance_km)}km"

    # Decimal(float) is exact, so ties are the true binary ties
    rounded = Decimal(distance_km).quantize(
        _ONE_DECIMAL, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT
    )
    return f"{rounded}km"


def wrap_longitude(lon: float) -> float:
    """Bring a longitude that ran past +/-180 back into [-180, 180)."""
    return (lon + 180) % 360 - 180
