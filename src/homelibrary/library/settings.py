# ABOUTME: Persisted user preferences: view mode, sort, storage and appearance modes.
# ABOUTME: A single AppSettings record keyed by a fixed id; unknown raw values fall back to defaults.

from dataclasses import dataclass
from enum import Enum

from homelibrary.library.sorting import SortOption, SortOrder

SETTINGS_ID = "app-settings"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


class StorageMode(str, Enum):
    LOCAL = "local"
    CLOUD = "cloud"


class AppearanceMode(str, Enum):
    SYSTEM = "System"
    LIGHT = "Light"
    DARK = "Dark"


def _parse(enum_type: type[Enum], raw: str | None, default: Enum) -> Enum:
    try:
        return enum_type(raw)
    except ValueError:
        return default


@dataclass
class AppSettings:
    """Process-wide preferences. Defaults apply until the record is first written."""

    view_mode: ViewMode = ViewMode.GRID
    sort_by: SortOption = SortOption.DATE_ADDED
    sort_order: SortOrder = SortOrder.DESCENDING
    storage_mode: StorageMode = StorageMode.LOCAL
    appearance_mode: AppearanceMode = AppearanceMode.SYSTEM
    id: str = SETTINGS_ID

    @classmethod
    def from_raw(
        cls,
        *,
        view_mode: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        storage_mode: str | None = None,
        appearance_mode: str | None = None,
    ) -> "AppSettings":
        """Build settings from stored strings, tolerating values this version doesn't know."""
        return cls(
            view_mode=_parse(ViewMode, view_mode, ViewMode.GRID),  # type: ignore[arg-type]
            sort_by=_parse(SortOption, sort_by, SortOption.DATE_ADDED),  # type: ignore[arg-type]
            sort_order=_parse(SortOrder, sort_order, SortOrder.DESCENDING),  # type: ignore[arg-type]
            storage_mode=_parse(StorageMode, storage_mode, StorageMode.LOCAL),  # type: ignore[arg-type]
            appearance_mode=_parse(  # type: ignore[arg-type]
                AppearanceMode, appearance_mode, AppearanceMode.SYSTEM
            ),
        )
