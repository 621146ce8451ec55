"""Validation helpers for untrusted request inputs."""

from __future__ import annotations

from artisan_geo.geo import parse_coordinates
from artisan_geo.models import GeoPoint

_MAX_LOCATION_LEN = 64


def validate_location_string(value: str) -> GeoPoint:
    """Validate a user-supplied "lat, lon" string.

    - must not be empty
    - max length 64 chars
    - exactly two comma-separated numbers, latitude first
    - latitude in [-90, 90], longitude in [-180, 180]

    Returns the parsed point or raises ValueError.
    """
    text = value.strip()

    if not text:
        raise ValueError("location must not be empty")
    if len(text) > _MAX_LOCATION_LEN:
        raise ValueError("location is too long")

    point = parse_coordinates(text)
    if point is None:
        raise ValueError(
            "location must be 'lat, lon' with lat in [-90, 90] and lon in [-180, 180]"
        )

    return point
