"""Garden error taxonomy. None of these is fatal at the session surface."""


class GardenError(Exception):
    """Base class for recoverable garden errors."""


class StorageUnavailable(GardenError):
    """The backing store rejected a write (unavailable, quota exceeded)."""


class MalformedPayload(GardenError):
    """Stored data could not be parsed or lacks required fields."""


class SizeMismatch(GardenError):
    """Tile count disagrees with size * size."""

    def __init__(self, size: int, count: int) -> None:
        super().__init__(f"expected {size * size} tiles for size {size}, got {count}")
        self.size = size
        self.count = count
