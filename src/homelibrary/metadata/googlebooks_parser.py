# ABOUTME: Decode schemas and parsing for Google Books volume search responses.
# ABOUTME: Picks the ISBN identifier and best cover image, and upgrades cover URLs to full size.

import re
from dataclasses import dataclass, field
from typing import Any

from homelibrary.metadata.genres import map_category_to_genre
from homelibrary.metadata.types import LookupResult

_ZOOM_THUMBNAIL_RE = re.compile(r"([?&])zoom=1(?=&|$)")
_EDGE_CURL_RE = re.compile(r"&edge=curl(?=&|$)")


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass
class ImageLinks:
    thumbnail: str | None = None
    small: str | None = None
    medium: str | None = None
    large: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "ImageLinks":
        data = _dict(data)
        return cls(
            thumbnail=_str_or_none(data.get("thumbnail")),
            small=_str_or_none(data.get("small")),
            medium=_str_or_none(data.get("medium")),
            large=_str_or_none(data.get("large")),
        )

    def best(self) -> str | None:
        """Largest available image: large, then medium, small, thumbnail."""
        for url in (self.large, self.medium, self.small, self.thumbnail):
            if url:
                return url
        return None


@dataclass
class IndustryIdentifier:
    type: str
    identifier: str

    @classmethod
    def from_json(cls, data: Any) -> "IndustryIdentifier":
        data = _dict(data)
        return cls(
            type=_str_or_none(data.get("type")) or "",
            identifier=_str_or_none(data.get("identifier")) or "",
        )


@dataclass
class VolumeInfo:
    title: str | None = None
    authors: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    image_links: ImageLinks = field(default_factory=ImageLinks)
    industry_identifiers: list[IndustryIdentifier] = field(default_factory=list)
    description: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "VolumeInfo":
        data = _dict(data)
        identifiers = data.get("industryIdentifiers")
        return cls(
            title=_str_or_none(data.get("title")),
            authors=_str_list(data.get("authors")),
            categories=_str_list(data.get("categories")),
            image_links=ImageLinks.from_json(data.get("imageLinks")),
            industry_identifiers=[
                IndustryIdentifier.from_json(entry)
                for entry in (identifiers if isinstance(identifiers, list) else [])
            ],
            description=_str_or_none(data.get("description")),
        )

    def isbn(self) -> str | None:
        """First non-empty identifier whose type mentions ISBN (ISBN_13, ISBN_10)."""
        for entry in self.industry_identifiers:
            if "ISBN" in entry.type and entry.identifier:
                return entry.identifier
        return None


def upgrade_cover_url(url: str) -> str:
    """Request the full-size image instead of the curled thumbnail, over https."""
    if url.startswith("http:"):
        url = "https:" + url[len("http:"):]
    url = _ZOOM_THUMBNAIL_RE.sub(r"\1zoom=0", url)
    return _EDGE_CURL_RE.sub("", url)


def parse_volumes_response(data: Any) -> LookupResult | None:
    """Parse a volumes search response, using only the first item.

    Returns None when there are no items or the first item has no title.
    """
    items = _dict(data).get("items")
    if not isinstance(items, list) or not items:
        return None

    info = VolumeInfo.from_json(_dict(items[0]).get("volumeInfo"))
    if not info.title:
        return None

    cover_url = info.image_links.best()
    return LookupResult(
        title=info.title,
        authors=info.authors,
        genre=map_category_to_genre(info.categories[0] if info.categories else None),
        cover_url=upgrade_cover_url(cover_url) if cover_url else None,
        isbn=info.isbn(),
        description=info.description,
        source="googlebooks",
    )
