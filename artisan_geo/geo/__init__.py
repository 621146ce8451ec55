"""Geometry utilities for proximity search."""

from .bbox import (
    bounding_box_crosses_antimeridian,
    bounding_box_crosses_pole,
    get_bounding_box,
    search_bounding_box,
)
from .constants import EARTH_RADIUS_KM, KM_PER_DEGREE_LAT, SEARCH_PAD_KM
from .coordinates import (
    format_distance,
    is_valid_coordinates,
    parse_coordinates,
    wrap_longitude,
)
from .distance import (
    calculate_distance,
    distance_between,
    is_within_radius,
    round_half_up,
    to_degrees,
    to_radians,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "KM_PER_DEGREE_LAT",
    "SEARCH_PAD_KM",
    "calculate_distance",
    "distance_between",
    "is_within_radius",
    "round_half_up",
    "to_degrees",
    "to_radians",
    "get_bounding_box",
    "search_bounding_box",
    "bounding_box_crosses_pole",
    "bounding_box_crosses_antimeridian",
    "format_distance",
    "is_valid_coordinates",
    "parse_coordinates",
    "wrap_longitude",
]
