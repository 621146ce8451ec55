#!/usr/bin/env python3
"""Seed the database with artisans scattered around a center point."""

from __future__ import annotations

import argparse
import math
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from artisan_geo.api.artisans import generate_artisan_id
from artisan_geo.database import close_database, get_cursor, init_database, insert_artisan
from artisan_geo.geo import (
    KM_PER_DEGREE_LAT,
    calculate_distance,
    parse_coordinates,
    wrap_longitude,
)
from artisan_geo.geo.constants import POLE_COS_THRESHOLD

CATEGORIES = ["plumber", "electrician", "carpenter", "painter", "mason", "tailor"]


def main() -> int:
    p = argparse.ArgumentParser(description="Seed artisan locations")
    p.add_argument("--db", default="./artisan_geo.db", help="SQLite database path")
    p.add_argument("--center", default="23.8103, 90.4125", help="Center as 'lat, lon'")
    p.add_argument("--radius-km", type=float, default=15, help="Scatter radius")
    p.add_argument("--count", type=int, default=50, help="Number of artisans")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    args = p.parse_args()

    center = parse_coordinates(args.center)
    if center is None:
        p.error(f"invalid --center: {args.center!r}")

    rng = random.Random(args.seed)
    now = datetime.now(timezone.utc).isoformat()

    init_database(args.db)
    try:
        with get_cursor() as cur:
            for i in range(args.count):
                # Uniform over the disc, then back to degrees
                r = args.radius_km * math.sqrt(rng.random())
                theta = rng.uniform(0, 2 * math.pi)
                lat = center.lat + (r * math.cos(theta)) / KM_PER_DEGREE_LAT
                lon = center.lon + (r * math.sin(theta)) / (
                    KM_PER_DEGREE_LAT * max(math.cos(math.radians(center.lat)), POLE_COS_THRESHOLD)
                )
                # Scatter near a pole or the antimeridian can leave the valid range
                lat = min(max(lat, -90.0), 90.0)
                lon = wrap_longitude(lon)
                insert_artisan(
                    cur,
                    generate_artisan_id(),
                    name=f"Artisan {i + 1}",
                    category=rng.choice(CATEGORIES),
                    rating=round(rng.uniform(2.5, 5), 1),
                    verified=rng.random() < 0.8,
                    lat=lat,
                    lon=lon,
                    timestamp=now,
                )
                print(
                    f"  {lat:.5f}, {lon:.5f}  "
                    f"({calculate_distance(center.lat, center.lon, lat, lon)} km)"
                )

        print(f"Seeded {args.count} artisans around {center.lat}, {center.lon}")
        return 0
    finally:
        close_database()


if __name__ == "__main__":
    raise SystemExit(main())
