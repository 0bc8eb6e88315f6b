# ABOUTME: Barcode scan session guard and camera permission checks.
# ABOUTME: Accepts the first valid ISBN code per session and ignores repeats until reset.

import logging
from collections.abc import Callable
from enum import Enum

from homelibrary.errors import ScannerPermissionError
from homelibrary.metadata.lookup import normalize_isbn

logger = logging.getLogger(__name__)

ISBN_LENGTHS = (10, 13)


class CameraAuthorization(str, Enum):
    NOT_DETERMINED = "notDetermined"
    AUTHORIZED = "authorized"
    DENIED = "denied"
    RESTRICTED = "restricted"


def ensure_camera_access(status: CameraAuthorization) -> bool:
    """Check camera permission before scanning.

    Returns True when access is granted and False when the user still has
    to be asked.

    Raises:
        ScannerPermissionError: If access was denied or is restricted.
    """
    if status in (CameraAuthorization.DENIED, CameraAuthorization.RESTRICTED):
        raise ScannerPermissionError()
    return status is CameraAuthorization.AUTHORIZED


def is_isbn_code(code: str) -> bool:
    """True if the code has 10 or 13 ISBN characters once formatting is stripped."""
    return len(normalize_isbn(code)) in ISBN_LENGTHS


class ScanSession:
    """Delivers at most one scanned code per session.

    Detections arrive from the capture loop through offer(). The first one
    that looks like an ISBN is accepted, the session stops, and everything
    after it is ignored until reset() or start().
    """

    def __init__(self, on_code: Callable[[str], None] | None = None) -> None:
        self._on_code = on_code
        self.is_scanning = False
        self.scanned_code: str | None = None
        self._has_scanned = False

    def start(self) -> None:
        if self.is_scanning:
            return
        self.reset()
        self.is_scanning = True

    def stop(self) -> None:
        self.is_scanning = False

    def reset(self) -> None:
        self._has_scanned = False
        self.scanned_code = None

    def offer(self, code: str | None) -> str | None:
        """Feed one detection. Returns the code if this call accepted it."""
        if self._has_scanned or not code:
            return None
        if not is_isbn_code(code):
            logger.debug("Ignoring non-ISBN barcode %r", code)
            return None

        self._has_scanned = True
        self.stop()
        self.scanned_code = code
        if self._on_code is not None:
            self._on_code(code)
        return code
