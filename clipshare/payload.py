"""Validation and encoding of partial payloads."""
import base64
import mimetypes
import os

from clipshare.errors import ImageTooLargeError, PayloadError


def validate_partial(data) -> dict:
    """Check that ``data`` is a usable partial payload.

    Returns a dict holding only the recognised fields. ``image`` may be
    ``None`` to clear the stored image.

    Raises:
        PayloadError: If ``data`` is not an object or a field has the wrong type.
    """
    if not isinstance(data, dict):
        raise PayloadError("Body must be a JSON object")

    partial = {}
    if "text" in data:
        if not isinstance(data["text"], str):
            raise PayloadError("'text' must be a string")
        partial["text"] = data["text"]
    if "image" in data:
        if data["image"] is not None and not isinstance(data["image"], str):
            raise PayloadError("'image' must be a string or null")
        partial["image"] = data["image"]
    return partial


def check_image_size(size: int, limit: int) -> None:
    if limit is not None and size > limit:
        raise ImageTooLargeError(size, limit)


def encode_image(raw: bytes, mime: str = "image/png") -> str:
    """Encode raw image bytes as a base64 data URI."""
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


def decode_image(data_uri: str) -> bytes:
    # Format: "data:<mime>;base64,<payload>", or raw base64
    if "," in data_uri:
        _, b64 = data_uri.split(",", 1)
    else:
        b64 = data_uri
    return base64.b64decode(b64)


def read_image_file(path, limit: int) -> str:
    """Read an image file into a data URI, refusing files over ``limit`` bytes.

    The size check happens before the file is read.
    """
    check_image_size(os.path.getsize(path), limit)
    mime, _ = mimetypes.guess_type(str(path))
    with open(path, "rb") as f:
        raw = f.read()
    return encode_image(raw, mime or "application/octet-stream")
