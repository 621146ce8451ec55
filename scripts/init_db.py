#!/usr/bin/env python3
"""
Initialize the Artisan Geo database.

Usage:
    python scripts/init_db.py [database_path]

If no path is provided, uses ./artisan_geo.db
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from artisan_geo.database import close_database, init_database


def main():
    db_path = sys.argv[1] if len(sys.argv) > 1 else "./artisan_geo.db"

    print(f"Initializing Artisan Geo database at: {db_path}")

    init_database(db_path)

    print("Database initialized successfully.")
    print("\nTo configure your server, set these environment variables:")
    print("  ARTISAN_GEO_DATABASE_PATH=/var/lib/artisan_geo/artisan_geo.db")
    print("  ARTISAN_GEO_MAX_RADIUS_KM=100")

    close_database()


if __name__ == "__main__":
    main()
