# ABOUTME: Editable book form data, validation, and conversion to and from Book records.
# ABOUTME: Used by manual entry, edit, and lookup-prefilled add flows.

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from homelibrary.errors import ValidationError
from homelibrary.library.types import (
    Book,
    BookLocation,
    Cover,
    CoverBlob,
    CoverURL,
    LocationKind,
    NoCover,
)
from homelibrary.metadata.types import LookupResult

MAX_TITLE_LENGTH = 500
MAX_NOTES_LENGTH = 5000


class LocationChoice(str, Enum):
    NONE = "None"
    PREDEFINED = "Saved Location"
    CUSTOM = "Custom"


def _optional(text: str) -> str | None:
    return text if text else None


@dataclass
class BookFormData:
    """Raw form fields for creating or editing a book.

    Authors are entered as one comma-separated string. Empty optional
    strings become None when the form is turned into a Book.
    """

    title: str = ""
    authors: str = ""
    genre: str = ""
    isbn: str = ""
    notes: str = ""
    is_favorite: bool = False
    location_choice: LocationChoice = LocationChoice.NONE
    selected_location_id: UUID | None = None
    custom_location_text: str = ""
    selected_tags: list[str] = field(default_factory=list)
    cover_data: bytes | None = None
    cover_url: str | None = None

    @property
    def is_valid(self) -> bool:
        return bool(self.title.strip())

    @property
    def authors_list(self) -> list[str]:
        parts = (part.strip() for part in self.authors.split(","))
        return [part for part in parts if part]

    @property
    def book_location(self) -> BookLocation | None:
        if self.location_choice is LocationChoice.PREDEFINED:
            if self.selected_location_id is None:
                return None
            return BookLocation.predefined(self.selected_location_id)
        if self.location_choice is LocationChoice.CUSTOM:
            if not self.custom_location_text:
                return None
            return BookLocation.custom(self.custom_location_text)
        return None

    @property
    def cover(self) -> Cover:
        if self.cover_data:
            return CoverBlob(data=self.cover_data, url=self.cover_url)
        if self.cover_url:
            return CoverURL(url=self.cover_url)
        return NoCover()

    def validate(self) -> None:
        """Check the form can be saved.

        Raises:
            ValidationError: If the title is blank or a field is too long.
        """
        if not self.is_valid:
            raise ValidationError("title", "Title is required.")
        if len(self.title.strip()) > MAX_TITLE_LENGTH:
            raise ValidationError(
                "title", f"Title must be at most {MAX_TITLE_LENGTH} characters."
            )
        if len(self.notes) > MAX_NOTES_LENGTH:
            raise ValidationError(
                "notes", f"Notes must be at most {MAX_NOTES_LENGTH} characters."
            )

    def to_book(self) -> Book:
        """Validate and build a new Book from the form."""
        self.validate()
        return Book(
            title=self.title.strip(),
            authors=self.authors_list,
            genre=_optional(self.genre),
            isbn=_optional(self.isbn),
            cover=self.cover,
            location=self.book_location,
            tags=list(self.selected_tags),
            notes=_optional(self.notes),
            is_favorite=self.is_favorite,
        )

    def apply_to(self, book: Book) -> None:
        """Validate and write the form back onto an existing book, in place."""
        self.validate()
        book.title = self.title.strip()
        book.authors = self.authors_list
        book.genre = _optional(self.genre)
        book.isbn = _optional(self.isbn)
        book.notes = _optional(self.notes)
        book.is_favorite = self.is_favorite
        book.tags = list(self.selected_tags)
        book.location = self.book_location
        book.cover = self.cover
        book.touch()

    @classmethod
    def from_book(cls, book: Book) -> "BookFormData":
        form = cls(
            title=book.title,
            authors=", ".join(book.authors),
            genre=book.genre or "",
            isbn=book.isbn or "",
            notes=book.notes or "",
            is_favorite=book.is_favorite,
            selected_tags=list(book.tags),
            cover_data=book.cover_data,
            cover_url=book.cover_url,
        )
        location = book.location
        if location is not None and location.kind is LocationKind.PREDEFINED:
            form.location_choice = LocationChoice.PREDEFINED
            form.selected_location_id = location.predefined_id
        elif location is not None:
            form.location_choice = LocationChoice.CUSTOM
            form.custom_location_text = location.custom_text or ""
        return form

    @classmethod
    def from_lookup(cls, result: LookupResult) -> "BookFormData":
        """Pre-fill a form from a metadata lookup so the user can review it."""
        return cls(
            title=result.title,
            authors=", ".join(result.authors),
            genre=result.genre or "",
            isbn=result.isbn or "",
            cover_data=result.cover_data,
            cover_url=result.cover_url,
        )
