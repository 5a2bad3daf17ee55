"""Exceptions raised by clipshare."""


def format_size(size: int) -> str:
    """Render a byte count as MB, KB or bytes, whichever reads naturally."""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):g}MB"
    if size >= 1024:
        return f"{size / 1024:g}KB"
    return f"{size} bytes"


class ClipshareError(Exception):
    """Base class for clipshare errors."""


class PayloadError(ClipshareError, ValueError):
    """Partial payload does not have the expected shape."""


class ImageTooLargeError(PayloadError):
    """Image is over the client-side upload limit."""

    def __init__(self, size, limit):
        self.size = size
        self.limit = limit
        super().__init__(f"Image must be less than {format_size(limit)} (got {size} bytes)")


class SyncError(ClipshareError):
    """Fetch or Update against the server failed."""
