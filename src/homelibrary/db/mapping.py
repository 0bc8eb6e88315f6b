# ABOUTME: Converts between record dataclasses and SQLite row dictionaries.
# ABOUTME: Handles JSON serialization for list fields, locations, covers, and timestamps.

import json
from datetime import datetime
from typing import Any
from uuid import UUID

from homelibrary.library.settings import AppSettings
from homelibrary.library.tags import UserTag
from homelibrary.library.types import (
    Book,
    BookLocation,
    Cover,
    CoverBlob,
    CoverURL,
    LocationKind,
    NoCover,
    PredefinedLocation,
    SyncStatus,
)


def _parse_sync_status(raw: str | None) -> SyncStatus:
    try:
        return SyncStatus(raw)
    except ValueError:
        return SyncStatus.SYNCED


def location_to_json(location: BookLocation | None) -> str | None:
    if location is None:
        return None
    return json.dumps(
        {
            "type": location.kind.value,
            "predefined_id": str(location.predefined_id) if location.predefined_id else None,
            "custom_text": location.custom_text,
        }
    )


def location_from_json(raw: str | None) -> BookLocation | None:
    """Decode a stored location. Unreadable values decode as no location."""
    if not raw:
        return None
    try:
        data = json.loads(raw)
        kind = LocationKind(data["type"])
        predefined_id = data.get("predefined_id")
        return BookLocation(
            kind=kind,
            predefined_id=UUID(predefined_id) if predefined_id else None,
            custom_text=data.get("custom_text"),
        )
    except (ValueError, KeyError, TypeError):
        return None


def _cover_from_columns(url: str | None, data: bytes | None) -> Cover:
    if data:
        return CoverBlob(data=bytes(data), url=url)
    if url:
        return CoverURL(url=url)
    return NoCover()


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict suitable for INSERT or UPDATE.

    Serializes authors and tags as JSON arrays and splits the cover variant
    into its URL and bytes columns.
    """
    return {
        "id": str(book.id),
        "title": book.title,
        "authors": json.dumps(book.authors),
        "genre": book.genre,
        "isbn": book.isbn,
        "cover_url": book.cover_url,
        "cover_data": book.cover_data,
        "location": location_to_json(book.location),
        "tags": json.dumps(book.tags),
        "notes": book.notes,
        "is_favorite": int(book.is_favorite),
        "date_added": book.date_added.isoformat(),
        "last_modified": book.last_modified.isoformat(),
        "added_by": book.added_by,
        "sync_status": book.sync_status.value,
    }


def row_to_book(row: Any) -> Book:
    """Convert a database row (dict-like) back to a Book."""
    return Book(
        id=UUID(row["id"]),
        title=row["title"],
        authors=json.loads(row["authors"]) if row["authors"] else [],
        genre=row["genre"],
        isbn=row["isbn"],
        cover=_cover_from_columns(row["cover_url"], row["cover_data"]),
        location=location_from_json(row["location"]),
        tags=json.loads(row["tags"]) if row["tags"] else [],
        notes=row["notes"],
        is_favorite=bool(row["is_favorite"]),
        date_added=datetime.fromisoformat(row["date_added"]),
        last_modified=datetime.fromisoformat(row["last_modified"]),
        added_by=row["added_by"],
        sync_status=_parse_sync_status(row["sync_status"]),
    )


def location_to_row(location: PredefinedLocation) -> dict[str, Any]:
    return {
        "id": str(location.id),
        "name": location.name,
        "created_at": location.created_at.isoformat(),
        "sync_status": location.sync_status.value,
    }


def row_to_location(row: Any) -> PredefinedLocation:
    return PredefinedLocation(
        id=UUID(row["id"]),
        name=row["name"],
        created_at=datetime.fromisoformat(row["created_at"]),
        sync_status=_parse_sync_status(row["sync_status"]),
    )


def tag_to_row(tag: UserTag) -> dict[str, Any]:
    return {
        "id": str(tag.id),
        "name": tag.name,
        "color_hex": tag.color_hex,
        "created_at": tag.created_at.isoformat(),
        "sync_status": tag.sync_status.value,
    }


def row_to_tag(row: Any) -> UserTag:
    return UserTag(
        id=UUID(row["id"]),
        name=row["name"],
        color_hex=row["color_hex"],
        created_at=datetime.fromisoformat(row["created_at"]),
        sync_status=_parse_sync_status(row["sync_status"]),
    )


def settings_to_row(settings: AppSettings) -> dict[str, Any]:
    return {
        "id": settings.id,
        "view_mode": settings.view_mode.value,
        "sort_by": settings.sort_by.value,
        "sort_order": settings.sort_order.value,
        "storage_mode": settings.storage_mode.value,
        "appearance_mode": settings.appearance_mode.value,
    }


def row_to_settings(row: Any) -> AppSettings:
    return AppSettings.from_raw(
        view_mode=row["view_mode"],
        sort_by=row["sort_by"],
        sort_order=row["sort_order"],
        storage_mode=row["storage_mode"],
        appearance_mode=row["appearance_mode"],
    )
