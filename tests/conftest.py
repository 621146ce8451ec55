"""Pytest configuration and fixtures for Artisan Geo tests."""

import importlib
import os
import tempfile

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def temp_db_path():
    """Create a temporary database path."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture(scope="function")
def client(temp_db_path):
    """Create a test client with fresh database."""
    # Set environment before importing modules
    os.environ["ARTISAN_GEO_DATABASE_PATH"] = temp_db_path

    # Reset all module state
    import artisan_geo.config
    import artisan_geo.database

    # Close any existing connection
    if artisan_geo.database._connection is not None:
        artisan_geo.database._connection.close()
    artisan_geo.database._connection = None
    artisan_geo.database._db_path = None

    # Reload config to pick up new environment
    importlib.reload(artisan_geo.config)

    # Reload main to get fresh lifespan
    import artisan_geo.main

    importlib.reload(artisan_geo.main)

    from artisan_geo.main import app

    with TestClient(app) as test_client:
        yield test_client

    # Cleanup
    artisan_geo.database.close_database()


@pytest.fixture
def create_artisan(client):
    """Return a helper that creates an artisan and returns its JSON."""

    def _create(lat, lon, name="Test Artisan", category="plumber", rating=4.0, verified=True):
        response = client.post(
            "/artisans",
            json={
                "name": name,
                "category": category,
                "rating": rating,
                "verified": verified,
                "location": {"lat": lat, "lon": lon},
            },
        )
        assert response.status_code == 201, f"Failed to create artisan: {response.json()}"
        return response.json()["artisan"]

    return _create
