"""Artisan listing endpoints."""

import secrets
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from artisan_geo.database import get_cursor, insert_artisan
from artisan_geo.models import (
    Artisan,
    ArtisanRequest,
    ArtisanResponse,
    DeleteResponse,
    Location,
)

router = APIRouter(prefix="/artisans")


def generate_artisan_id() -> str:
    """Generate a unique artisan ID."""
    return f"art_{secrets.token_urlsafe(9)}"


@router.post("", response_model=ArtisanResponse, status_code=201)
async def create_artisan(request: ArtisanRequest) -> ArtisanResponse:
    """
    Create a new artisan listing.

    The location is validated at the request boundary, so stored
    coordinates are always in range.
    """
    artisan_id = generate_artisan_id()
    now = datetime.now(timezone.utc)
    now_str = now.isoformat()

    with get_cursor() as cursor:
        insert_artisan(
            cursor,
            artisan_id,
            name=request.name,
            category=request.category,
            rating=request.rating,
            verified=request.verified,
            lat=request.location.lat,
            lon=request.location.lon,
            timestamp=now_str,
        )

    artisan = Artisan(
        id=artisan_id,
        name=request.name,
        category=request.category,
        rating=request.rating,
        verified=request.verified,
        location=request.location,
        created=now,
        updated=now,
    )

    return ArtisanResponse(artisan=artisan)


@router.get("/{artisan_id}", response_model=ArtisanResponse)
async def get_artisan(artisan_id: str) -> ArtisanResponse:
    """Fetch a single artisan listing."""
    artisan = get_artisan_by_id(artisan_id)
    if artisan is None:
        raise HTTPException(status_code=404, detail="Artisan not found")
    return ArtisanResponse(artisan=artisan)


@router.put("/{artisan_id}", response_model=ArtisanResponse)
async def update_artisan(artisan_id: str, request: ArtisanRequest) -> ArtisanResponse:
    """Replace an existing artisan listing."""
    with get_cursor() as cursor:
        cursor.execute("SELECT created_at FROM artisans WHERE id = ?", (artisan_id,))
        row = cursor.fetchone()

        if not row:
            raise HTTPException(status_code=404, detail="Artisan not found")

        created_at = row["created_at"]

    now = datetime.now(timezone.utc)

    with get_cursor() as cursor:
        cursor.execute(
            """
            UPDATE artisans SET
                name = ?, category = ?, rating = ?, verified = ?,
                lat = ?, lon = ?,
                updated_at = ?
            WHERE id = ?
            """,
            (
                request.name,
                request.category,
                request.rating,
                int(request.verified),
                request.location.lat,
                request.location.lon,
                now.isoformat(),
                artisan_id,
            ),
        )

    artisan = Artisan(
        id=artisan_id,
        name=request.name,
        category=request.category,
        rating=request.rating,
        verified=request.verified,
        location=request.location,
        created=datetime.fromisoformat(created_at),
        updated=now,
    )

    return ArtisanResponse(artisan=artisan)


@router.delete("/{artisan_id}", response_model=DeleteResponse)
async def delete_artisan(artisan_id: str) -> DeleteResponse:
    """Remove an artisan listing."""
    with get_cursor() as cursor:
        cursor.execute("DELETE FROM artisans WHERE id = ?", (artisan_id,))
        if cursor.rowcount == 0:
            raise HTTPException(status_code=404, detail="Artisan not found")

    return DeleteResponse(id=artisan_id)


def get_artisan_by_id(artisan_id: str) -> Artisan | None:
    """
    Fetch an artisan by ID.

    Utility function for other modules.
    """
    with get_cursor() as cursor:
        cursor.execute("SELECT * FROM artisans WHERE id = ?", (artisan_id,))
        row = cursor.fetchone()

        if not row:
            return None

        return row_to_artisan(row)


def row_to_artisan(row) -> Artisan:
    """Convert a database row to an Artisan model."""
    return Artisan(
        id=row["id"],
        name=row["name"],
        category=row["category"],
        rating=row["rating"],
        verified=bool(row["verified"]),
        location=Location(lat=row["lat"], lon=row["lon"]),
        created=datetime.fromisoformat(row["created_at"]),
        updated=datetime.fromisoformat(row["updated_at"]),
    )
