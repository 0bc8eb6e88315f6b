# ABOUTME: User tags and the rotating color palette used when a tag is created.
# ABOUTME: The rotation counter is owned by TagColorRotation, seeded from the existing tag count.

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from homelibrary.library.types import SyncStatus, utcnow

TAG_COLORS: tuple[str, ...] = (
    "#3B82F6",  # blue
    "#10B981",  # green
    "#F59E0B",  # amber
    "#EF4444",  # red
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#06B6D4",  # cyan
    "#F97316",  # orange
)

PASTEL_TAG_COLORS: tuple[str, ...] = (
    "#DBEAFE",
    "#D1FAE5",
    "#FEF3C7",
    "#FEE2E2",
    "#EDE9FE",
    "#FCE7F3",
    "#CFFAFE",
    "#FFEDD5",
)

DEFAULT_TAG_COLOR = TAG_COLORS[0]


@dataclass
class UserTag:
    """A user-created label with a display color."""

    name: str
    color_hex: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    sync_status: SyncStatus = SyncStatus.SYNCED

    @property
    def pastel_hex(self) -> str:
        """Light variant of the tag color, or the first pastel for custom colors."""
        try:
            return PASTEL_TAG_COLORS[TAG_COLORS.index(self.color_hex.upper())]
        except ValueError:
            return PASTEL_TAG_COLORS[0]


class TagColorRotation:
    """Hands out palette colors in order, wrapping after the last one.

    The position is explicit state rather than a process global. Callers that
    want colors to keep rotating across restarts seed it with the number of
    tags that already exist (see from_existing).
    """

    def __init__(self, start: int = 0) -> None:
        self._index = start

    @classmethod
    def from_existing(cls, tag_count: int) -> "TagColorRotation":
        return cls(start=tag_count)

    @property
    def index(self) -> int:
        return self._index

    def next_color(self) -> str:
        color = TAG_COLORS[self._index % len(TAG_COLORS)]
        self._index += 1
        return color

    def reset(self) -> None:
        self._index = 0


def create_tag(
    name: str, rotation: TagColorRotation, color_hex: str | None = None
) -> UserTag:
    """Create a tag. An explicit color is kept as-is and does not advance the rotation."""
    color = color_hex if color_hex is not None else rotation.next_color()
    return UserTag(name=name, color_hex=color)
