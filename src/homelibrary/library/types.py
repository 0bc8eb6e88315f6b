# ABOUTME: Core record types for the Home Library catalog: books, locations, and tags.
# ABOUTME: Pure data plus display helpers; no I/O happens here.

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_LOCATION = "Unknown Location"

# Suggested genres offered when editing a book. The genre field itself is open.
GENRES: tuple[str, ...] = (
    "Fiction",
    "Non-Fiction",
    "Mystery",
    "Science Fiction",
    "Fantasy",
    "Romance",
    "Thriller",
    "Horror",
    "Biography",
    "History",
    "Science",
    "Self-Help",
    "Business",
    "Children",
    "Young Adult",
    "Poetry",
    "Art",
    "Cooking",
    "Travel",
    "Religion",
    "Philosophy",
    "Other",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SyncStatus(str, Enum):
    """Remote sync state. Reserved for future sync; everything is 'synced' today."""

    SYNCED = "synced"
    PENDING_UPLOAD = "pendingUpload"
    PENDING_DELETE = "pendingDelete"
    CONFLICT = "conflict"


class LocationKind(str, Enum):
    PREDEFINED = "predefined"
    CUSTOM = "custom"


@dataclass
class PredefinedLocation:
    """A saved, reusable place label such as "Living Room - Shelf A"."""

    name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    sync_status: SyncStatus = SyncStatus.SYNCED


@dataclass(frozen=True)
class BookLocation:
    """Where a book lives: a reference to a predefined location, or free text."""

    kind: LocationKind
    predefined_id: UUID | None = None
    custom_text: str | None = None

    @classmethod
    def predefined(cls, location_id: UUID) -> "BookLocation":
        return cls(kind=LocationKind.PREDEFINED, predefined_id=location_id)

    @classmethod
    def custom(cls, text: str) -> "BookLocation":
        return cls(kind=LocationKind.CUSTOM, custom_text=text)

    def display_text(self, locations: list[PredefinedLocation]) -> str:
        """Resolve the label shown for this location.

        Predefined references whose id no longer resolves fall back to
        "Unknown Location".
        """
        if self.kind is LocationKind.CUSTOM:
            return self.custom_text if self.custom_text is not None else UNKNOWN_LOCATION
        for location in locations:
            if location.id == self.predefined_id:
                return location.name
        return UNKNOWN_LOCATION


@dataclass(frozen=True)
class NoCover:
    """The book has no cover image."""


@dataclass(frozen=True)
class CoverURL:
    """A cover that is only known by its remote URL."""

    url: str


@dataclass(frozen=True)
class CoverBlob:
    """Cover image bytes held locally. The source URL is kept when known."""

    data: bytes
    url: str | None = None


Cover = NoCover | CoverURL | CoverBlob


@dataclass
class Book:
    """A book owned by the user.

    Tags reference UserTag.name by value. Renaming or deleting a tag does not
    touch the books that carry the old name.
    """

    title: str
    authors: list[str] = field(default_factory=list)
    genre: str | None = None
    isbn: str | None = None
    cover: Cover = field(default_factory=NoCover)
    location: BookLocation | None = None
    tags: list[str] = field(default_factory=list)
    notes: str | None = None
    is_favorite: bool = False
    id: UUID = field(default_factory=uuid4)
    date_added: datetime = field(default_factory=utcnow)
    last_modified: datetime = field(default_factory=utcnow)
    added_by: str | None = None
    sync_status: SyncStatus = SyncStatus.SYNCED

    @property
    def authors_display(self) -> str:
        return ", ".join(self.authors) if self.authors else UNKNOWN_AUTHOR

    @property
    def has_authors(self) -> bool:
        return bool(self.authors) and self.authors[0] != ""

    @property
    def cover_url(self) -> str | None:
        if isinstance(self.cover, (CoverURL, CoverBlob)):
            return self.cover.url
        return None

    @property
    def cover_data(self) -> bytes | None:
        """Image bytes for display. Local bytes win over a remote URL."""
        if isinstance(self.cover, CoverBlob):
            return self.cover.data
        return None

    def location_display(self, locations: list[PredefinedLocation]) -> str | None:
        if self.location is None:
            return None
        return self.location.display_text(locations)

    def touch(self) -> None:
        """Record an in-place modification."""
        self.last_modified = utcnow()

    def toggle_favorite(self) -> None:
        self.is_favorite = not self.is_favorite
        self.touch()
