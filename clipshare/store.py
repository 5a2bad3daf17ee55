"""In-memory shared clipboard.

One ``SharedStore`` holds the single ``SharedPayload`` that every connected
device reads and writes. Writes are shallow merges applied under a lock, so
concurrent requests never observe or leave a half-merged payload.
"""
import dataclasses
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

FIELDS = ("text", "image")


@dataclass
class SharedPayload:
    text: str = ""
    image: Optional[str] = None  # data URI

    def to_dict(self) -> dict:
        data = {"text": self.text}
        if self.image is not None:
            data["image"] = self.image
        return data


class SharedStore:
    def __init__(self):
        self._payload = SharedPayload()
        self._lock = threading.Lock()

    def read(self) -> SharedPayload:
        """Return a copy of the current payload."""
        with self._lock:
            return dataclasses.replace(self._payload)

    def write(self, partial: Mapping) -> SharedPayload:
        """Merge the fields present in ``partial`` and return the full result.

        Keys other than ``text`` and ``image`` are ignored. Validation is the
        caller's job.
        """
        changes = {key: partial[key] for key in FIELDS if key in partial}
        with self._lock:
            self._payload = dataclasses.replace(self._payload, **changes)
            return dataclasses.replace(self._payload)
