"""Python client for a clipshare server.

``SyncClient`` talks to the ``/sync`` endpoint. ``Poller`` keeps a local copy
of the shared payload, refreshes it on a fixed interval and pushes local
edits back one field at a time.
"""
import logging
import threading
from typing import Callable, Optional

import pyperclip
import requests

from clipshare import config
from clipshare.errors import PayloadError, SyncError
from clipshare.payload import decode_image, read_image_file, validate_partial
from clipshare.store import SharedPayload

logger = logging.getLogger(__name__)

MODES = ("paste", "image")


class SyncClient:
    def __init__(self, base_url: str, timeout: float = config.REQUEST_TIMEOUT, session=None):
        self.url = base_url.rstrip("/") + "/sync"
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> dict:
        """GET the current payload.

        Raises:
            SyncError: On transport failure, a non-2xx status or a bad body.
        """
        return self._request("GET")

    def update(self, **fields) -> dict:
        """POST only the given fields and return the merged payload."""
        return self._request("POST", json=fields)

    def _request(self, method, **kwargs):
        try:
            resp = self.session.request(method, self.url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise SyncError(f"{method} {self.url} failed: {e}") from e
        try:
            validate_partial(data)
        except PayloadError as e:
            raise SyncError(f"{method} {self.url} returned a bad payload: {e}") from e
        return data

    def close(self):
        self.session.close()


class Poller:
    """Cancellable repeating fetch plus optimistic local edits.

    Args:
        client: Client used for Fetch and Update.
        interval: Seconds between fetches.
        max_image_bytes: Largest image ``upload_image`` will send.
        on_change: Called with a ``SharedPayload`` whenever local state changes.
        on_error: Called with the exception when an Update fails.
    """

    def __init__(
        self,
        client: SyncClient,
        interval: float = config.POLL_INTERVAL,
        max_image_bytes: int = config.MAX_IMAGE_BYTES,
        on_change: Optional[Callable[[SharedPayload], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.client = client
        self.interval = interval
        self.max_image_bytes = max_image_bytes
        self.on_change = on_change
        self.on_error = on_error

        self.mode = "paste"
        self.text = ""
        self.image: Optional[str] = None

        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._cancelled = False
        self._thread: Optional[threading.Thread] = None

    # ----- lifecycle -----

    def start(self) -> None:
        """Fetch once, then keep fetching every ``interval`` seconds."""
        if self.running:
            return
        with self._lock:
            self._cancelled = False
        self._stop.clear()
        self.poll_once()
        self._thread = threading.Thread(target=self._run, name="clipshare-poller", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the timer. Responses still in flight are discarded."""
        with self._lock:
            self._cancelled = True
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until ``stop`` is called or ``timeout`` elapses."""
        return self._stop.wait(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self):
        while not self._stop.wait(self.interval):
            self.poll_once()

    def poll_once(self) -> bool:
        """Fetch and overwrite local state. Returns False if nothing was applied."""
        try:
            data = self.client.fetch()
        except SyncError as e:
            logger.warning("Fetch failed, keeping current state: %s", e)
            return False
        with self._lock:
            if self._cancelled:
                logger.debug("Poller stopped, dropping late fetch response")
                return False
            self.text = data.get("text") or ""
            self.image = data.get("image")
        self._changed()
        return True

    # ----- user actions -----

    def set_text(self, text: str) -> bool:
        with self._lock:
            self.text = text
        self._changed()
        return self._push(text=text)

    def paste_from_clipboard(self) -> Optional[str]:
        """Share whatever text is on the local clipboard."""
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.error("Failed to paste from clipboard: %s", e)
            self._notify_error(e)
            return None
        if text:
            self.set_text(text)
        return text

    def upload_image(self, path) -> bool:
        """Share an image file.

        Raises:
            ImageTooLargeError: If the file is over ``max_image_bytes``;
                nothing is sent in that case.
        """
        data_uri = read_image_file(path, self.max_image_bytes)
        with self._lock:
            self.image = data_uri
        self._changed()
        return self._push(image=data_uri)

    def save_image(self, path) -> int:
        """Write the current image to ``path`` and return the byte count."""
        if self.image is None:
            raise PayloadError("No image shared yet")
        raw = decode_image(self.image)
        with open(path, "wb") as f:
            f.write(raw)
        return len(raw)

    def toggle_mode(self) -> str:
        self.mode = MODES[1 - MODES.index(self.mode)]
        return self.mode

    def snapshot(self) -> SharedPayload:
        with self._lock:
            return SharedPayload(text=self.text, image=self.image)

    # ----- internals -----

    def _push(self, **fields) -> bool:
        try:
            self.client.update(**fields)
        except SyncError as e:
            logger.error("Failed to save %s: %s", ", ".join(fields), e)
            if not self._cancelled:
                self._notify_error(e)
            return False
        return True

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self.snapshot())

    def _notify_error(self, e):
        if self.on_error is not None:
            self.on_error(e)
