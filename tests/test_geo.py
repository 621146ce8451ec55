"""Tests for geometry utilities."""

import math

import pytest

from artisan_geo.geo import (
    calculate_distance,
    distance_between,
    format_distance,
    get_bounding_box,
    is_valid_coordinates,
    is_within_radius,
    parse_coordinates,
    round_half_up,
    search_bounding_box,
    to_degrees,
    to_radians,
    wrap_longitude,
)
from artisan_geo.models import GeoPoint

DHAKA = (23.8103, 90.4125)
CHITTAGONG = (22.3569, 91.7832)

POINTS = [
    (0, 0),
    DHAKA,
    CHITTAGONG,
    (-33.8568, 151.2153),
    (51.5074, -0.1278),
    (89.9, 179.9),
    (-90, -180),
]


class TestCalculateDistance:
    """Tests for Haversine distance."""

    @pytest.mark.parametrize("lat,lon", POINTS)
    def test_same_point(self, lat, lon):
        """Distance from a point to itself should be zero."""
        assert calculate_distance(lat, lon, lat, lon) == 0.0

    def test_one_degree_longitude_at_equator(self):
        """One degree of longitude at the equator is about 111.19 km."""
        assert calculate_distance(0, 0, 0, 1) == 111.19

    def test_known_distance(self):
        """Dhaka to Chittagong is roughly 200 km as the crow flies."""
        distance = calculate_distance(*DHAKA, *CHITTAGONG)
        assert 190 < distance < 220

    @pytest.mark.parametrize("p", POINTS)
    @pytest.mark.parametrize("q", POINTS)
    def test_symmetric(self, p, q):
        """Swapping the points should not change the distance."""
        assert calculate_distance(*p, *q) == pytest.approx(calculate_distance(*q, *p), abs=0.01)

    def test_antipodal_points(self):
        """Antipodal points are half the circumference apart."""
        distance = calculate_distance(0, 0, 0, 180)
        assert distance == pytest.approx(math.pi * 6371, abs=0.01)

    def test_rounded_to_two_decimals(self):
        """Results carry at most two decimal places."""
        distance = calculate_distance(*DHAKA, *CHITTAGONG)
        assert distance == round(distance, 2)

    def test_nan_propagates(self):
        """NaN input gives NaN output instead of raising."""
        assert math.isnan(calculate_distance(math.nan, 0, 0, 0))

    def test_infinity_gives_nan(self):
        """Infinite input gives NaN output instead of raising."""
        assert math.isnan(calculate_distance(0, math.inf, 0, 0))

    def test_huge_finite_input_gives_nan(self):
        """Degrees too large to convert to radians give NaN, not an error."""
        assert math.isnan(calculate_distance(1e308, 0, 0, 0))
        assert math.isnan(calculate_distance(0, 0, 0, -1e308))

    def test_out_of_range_not_rejected(self):
        """Out-of-range degrees are not validated."""
        distance = calculate_distance(200, 0, 0, 400)
        assert isinstance(distance, float)


class TestRounding:
    """Tests for half-up rounding."""

    def test_ties_round_up(self):
        """Ties go up, unlike Python's round()."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2

    def test_two_decimals(self):
        assert round_half_up(111.19492664, 2) == 111.19

    def test_non_finite_unchanged(self):
        assert math.isnan(round_half_up(math.nan, 2))
        assert round_half_up(math.inf, 2) == math.inf


class TestDegreeConversion:
    """Tests for degree/radian conversion."""

    def test_to_degrees(self):
        assert to_degrees(math.pi) == pytest.approx(180)
        assert to_degrees(0) == 0

    @pytest.mark.parametrize("degrees", [-180, -90, -45.5, 0, 12.34, 90, 180, 720])
    def test_round_trip(self, degrees):
        """to_degrees is the inverse of the radians conversion."""
        assert to_degrees(degrees * math.pi / 180) == pytest.approx(degrees)
        assert to_degrees(to_radians(degrees)) == pytest.approx(degrees)


class TestIsWithinRadius:
    """Tests for radius containment."""

    def test_inside(self):
        assert is_within_radius(*DHAKA, 23.8, 90.4, 5)

    def test_outside(self):
        assert not is_within_radius(*DHAKA, *CHITTAGONG, 50)

    def test_boundary_inclusive(self):
        """A point exactly at the radius counts as within."""
        radius = calculate_distance(*DHAKA, *CHITTAGONG)
        assert is_within_radius(*DHAKA, *CHITTAGONG, radius)
        assert not is_within_radius(*DHAKA, *CHITTAGONG, radius - 0.01)

    @pytest.mark.parametrize("radius", [0, 0.5, 10, 111.19, 250, 20000])
    def test_matches_distance(self, radius):
        """Containment agrees with calculate_distance for every pair."""
        for p in POINTS:
            for q in POINTS:
                expected = calculate_distance(*p, *q) <= radius
                assert is_within_radius(*p, *q, radius) is expected

    def test_nan_is_never_within(self):
        assert not is_within_radius(math.nan, 0, 0, 0, 100)


class TestBoundingBox:
    """Tests for bounding box computation."""

    def test_latitude_delta(self):
        """111.32 km is exactly one degree of latitude."""
        bbox = get_bounding_box(10, 20, 111.32)
        assert bbox.min_lat == pytest.approx(9)
        assert bbox.max_lat == pytest.approx(11)

    def test_longitude_widens_with_latitude(self):
        """At 60 degrees a degree of longitude is half as long."""
        bbox = get_bounding_box(60, 0, 111.32)
        assert bbox.min_lon == pytest.approx(-2)
        assert bbox.max_lon == pytest.approx(2)

    @pytest.mark.parametrize("lat,lon", POINTS[:-2] + [(-89.5, 0), (45, 179.99)])
    @pytest.mark.parametrize("radius", [0.01, 1, 50, 500])
    def test_contains_center(self, lat, lon, radius):
        """The center lies strictly inside the box for any positive radius."""
        bbox = get_bounding_box(lat, lon, radius)
        assert bbox.min_lat < lat < bbox.max_lat
        assert bbox.min_lon < lon < bbox.max_lon

    def test_not_clamped(self):
        """Bounds may run past the valid coordinate ranges."""
        bbox = get_bounding_box(89, 179, 500)
        assert bbox.max_lat > 90
        assert bbox.max_lon > 180

    @pytest.mark.parametrize("lat", [90, -90])
    def test_pole_spans_all_longitudes(self, lat):
        """At a pole the longitude span is the full circle, not infinite."""
        bbox = get_bounding_box(lat, 30, 10)
        assert bbox.min_lon == -150
        assert bbox.max_lon == 210
        assert math.isfinite(bbox.max_lon - bbox.min_lon)
        assert bbox.min_lat < lat < bbox.max_lat

    def test_near_pole_wide_but_finite(self):
        """Just off the pole the box is wide but computed normally."""
        bbox = get_bounding_box(89, 0, 10)
        assert bbox.max_lon - bbox.min_lon > 1
        assert bbox.max_lon < 180

    def test_nan_latitude(self):
        bbox = get_bounding_box(math.nan, 0, 10)
        assert math.isnan(bbox.min_lat)
        assert math.isnan(bbox.min_lon)

    def test_huge_latitude(self):
        """A latitude that overflows in radians gives NaN longitudes."""
        bbox = get_bounding_box(1e308, 0, 10)
        assert math.isnan(bbox.min_lon)
        assert math.isnan(bbox.max_lon)
        assert bbox.max_lat == 1e308


class TestSearchBoundingBox:
    """Tests for the box used to narrow nearby search queries."""

    def test_covers_due_north_edge(self):
        """A point just inside the radius lies past the plain box but in this one."""
        lat = 9.995 / 111.195
        assert is_within_radius(0, 0, lat, 0, 10)
        assert lat > get_bounding_box(0, 0, 10).max_lat
        assert search_bounding_box(0, 0, 10).max_lat > lat

    def test_covers_east_edge_at_high_latitude(self):
        """At 70N the cap is wider in longitude than r / (111.32 cos lat)."""
        radius = calculate_distance(70, 0, 70, 2.6)
        assert is_within_radius(70, 0, 70, 2.6, radius)
        assert get_bounding_box(70, 0, radius).max_lon < 2.6
        bbox = search_bounding_box(70, 0, radius)
        assert bbox.max_lon > 2.6
        assert bbox.min_lon < -2.6

    @pytest.mark.parametrize("lat,lon", [(0, 0), DHAKA, (60, 10), (-33.8568, 151.2153)])
    @pytest.mark.parametrize("radius", [1, 50])
    def test_contains_plain_box(self, lat, lon, radius):
        plain = get_bounding_box(lat, lon, radius)
        bbox = search_bounding_box(lat, lon, radius)
        assert bbox.min_lat < plain.min_lat
        assert bbox.max_lat > plain.max_lat
        assert bbox.min_lon < plain.min_lon
        assert bbox.max_lon > plain.max_lon

    @pytest.mark.parametrize("lat", [90, -90, 89.9])
    def test_spans_all_longitudes_when_cap_reaches_pole(self, lat):
        bbox = search_bounding_box(lat, 30, 20)
        assert bbox.min_lon == -150
        assert bbox.max_lon == 210

    def test_nan_latitude(self):
        bbox = search_bounding_box(math.nan, 0, 10)
        assert math.isnan(bbox.min_lat)
        assert math.isnan(bbox.min_lon)


class TestFormatDistance:
    """Tests for display formatting."""

    @pytest.mark.parametrize(
        "distance,expected",
        [
            (0.5, "500m"),
            (0.001, "1m"),
            (0, "0m"),
            (0.9994, "999m"),
            (1, "1.0km"),
            (2.5, "2.5km"),
            (2.25, "2.3km"),
            (12.345, "12.3km"),
            (111.19, "111.2km"),
            (-0.25, "-250m"),
            (-3, "-3000m"),
            (math.nan, "NaNkm"),
            (math.inf, "Infinitykm"),
            (-math.inf, "-Infinitym"),
        ],
    )
    def test_format(self, distance, expected):
        assert format_distance(distance) == expected


class TestIsValidCoordinates:
    """Tests for coordinate range checks."""

    @pytest.mark.parametrize(
        "lat,lon",
        [(90, 180), (-90, -180), (0, 0), (23.8103, 90.4125)],
    )
    def test_valid(self, lat, lon):
        assert is_valid_coordinates(lat, lon)

    @pytest.mark.parametrize(
        "lat,lon",
        [(91, 0), (0, -181), (-90.0001, 0), (0, 180.0001), (math.nan, 0), (0, math.inf)],
    )
    def test_invalid(self, lat, lon):
        assert not is_valid_coordinates(lat, lon)


class TestParseCoordinates:
    """Tests for coordinate string parsing."""

    def test_lat_lon_order(self):
        """First token is latitude, second is longitude."""
        point = parse_coordinates("12.34, -56.78")
        assert point == GeoPoint(lat=12.34, lon=-56.78)

    def test_whitespace(self):
        assert parse_coordinates("  90 ,180  ") == GeoPoint(lat=90, lon=180)

    def test_number_forms(self):
        assert parse_coordinates(".5,-.5") == GeoPoint(lat=0.5, lon=-0.5)
        assert parse_coordinates("1e1, +2") == GeoPoint(lat=10, lon=2)

    def test_trailing_junk_ignored(self):
        """Only the leading number of each token is read."""
        assert parse_coordinates("12.5km, 3deg") == GeoPoint(lat=12.5, lon=3)

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-number, 5",
            "5, abc",
            "100, 5",
            "5, 181",
            "12.34",
            "1, 2, 3",
            "",
            ",",
            "nan, 0",
            "Infinity, 0",
        ],
    )
    def test_failure_marker(self, text):
        """Malformed or out-of-range input returns None, never raises."""
        assert parse_coordinates(text) is None


class TestDistanceBetween:
    """Tests for the checked distance variant."""

    def test_valid_points(self):
        start = GeoPoint(lat=0, lon=0)
        end = GeoPoint(lat=0, lon=1)
        assert distance_between(start, end) == 111.19

    def test_invalid_point(self):
        """GeoPoint accepts any floats; the checked variant rejects them."""
        start = GeoPoint(lat=91, lon=0)
        end = GeoPoint(lat=0, lon=0)
        assert distance_between(start, end) is None
        assert distance_between(end, GeoPoint(lat=0, lon=math.nan)) is None


class TestWrapLongitude:
    """Tests for longitude wrapping."""

    @pytest.mark.parametrize(
        "lon,expected",
        [(0, 0), (90.5, 90.5), (190, -170), (-181, 179), (540, -180), (-179.5, -179.5)],
    )
    def test_wrap(self, lon, expected):
        assert wrap_longitude(lon) == pytest.approx(expected)
