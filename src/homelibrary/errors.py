# ABOUTME: Exception taxonomy shared across the Home Library packages.
# ABOUTME: Every failure the package raises on purpose derives from HomeLibraryError.


class HomeLibraryError(Exception):
    """Base class for all Home Library errors."""


class NotFoundError(HomeLibraryError):
    """Raised when no metadata provider returned usable data for a lookup."""


class NetworkError(HomeLibraryError):
    """Raised when an HTTP request fails at the transport level or with a bad status."""


class ValidationError(HomeLibraryError):
    """Raised when a book form cannot be saved (blank title, over-long fields)."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ScannerPermissionError(HomeLibraryError):
    """Raised when camera access is denied for barcode scanning."""

    def __init__(self) -> None:
        super().__init__(
            "Camera permission denied. Enable camera access in system settings, "
            "or enter the book details manually."
        )


class StorageError(HomeLibraryError):
    """Raised when the library database file cannot be used."""
