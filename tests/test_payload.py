#!/usr/bin/env python3
"""Tests for payload validation and image encoding."""
import base64

import pytest

from clipshare.errors import ImageTooLargeError, PayloadError, format_size
from clipshare.payload import (
    check_image_size,
    decode_image,
    encode_image,
    read_image_file,
    validate_partial,
)


@pytest.mark.parametrize("data", [None, [], "text", 3, ["text", "x"]])
def test_validate_partial_rejects_non_objects(data) -> None:
    """Test anything other than a dict is rejected."""
    with pytest.raises(PayloadError):
        validate_partial(data)


@pytest.mark.parametrize("data", [{"text": 1}, {"text": None}, {"image": 5}, {"image": ["x"]}])
def test_validate_partial_rejects_wrong_field_types(data) -> None:
    """Test text must be a string and image a string or None."""
    with pytest.raises(PayloadError):
        validate_partial(data)


def test_validate_partial_keeps_known_fields_only() -> None:
    """Test unknown keys are dropped and known ones kept as given."""
    assert validate_partial({"text": "a", "image": None, "extra": 1}) == {"text": "a", "image": None}
    assert validate_partial({}) == {}


def test_check_image_size_limit() -> None:
    """Test sizes above the limit raise; equal or no limit pass."""
    check_image_size(10, 10)
    check_image_size(10 ** 9, None)
    with pytest.raises(ImageTooLargeError) as exc_info:
        check_image_size(5 * 1024 * 1024 + 1, 5 * 1024 * 1024)
    assert "less than 5MB" in str(exc_info.value)


def test_image_too_large_is_payload_error() -> None:
    """Test ImageTooLargeError is a PayloadError and a ValueError."""
    err = ImageTooLargeError(2, 1)
    assert isinstance(err, PayloadError)
    assert isinstance(err, ValueError)


def test_encode_image_builds_data_uri() -> None:
    """Test encode_image produces a base64 data URI with the mime type."""
    assert encode_image(b"abc", "image/gif") == "data:image/gif;base64," + base64.b64encode(b"abc").decode()


def test_decode_image_accepts_data_uri_and_raw_base64() -> None:
    """Test decode_image handles both a data URI and bare base64."""
    raw = base64.b64encode(b"\x00\x01").decode()
    assert decode_image(f"data:image/png;base64,{raw}") == b"\x00\x01"
    assert decode_image(raw) == b"\x00\x01"


def test_read_image_file(png_file) -> None:
    """Test a file is read into a data URI with a guessed mime type."""
    data_uri = read_image_file(png_file, 1024)
    assert data_uri.startswith("data:image/png;base64,")
    assert decode_image(data_uri) == png_file.read_bytes()


def test_read_image_file_over_limit(png_file) -> None:
    """Test a file larger than the limit is refused."""
    with pytest.raises(ImageTooLargeError):
        read_image_file(png_file, 8)


@pytest.mark.parametrize(
    "size, label",
    [(5 * 1024 * 1024, "5MB"), (1536 * 1024, "1.5MB"), (512 * 1024, "512KB"), (1000, "1000 bytes")],
)
def test_format_size(size, label) -> None:
    """Test sizes are shown in the largest unit that keeps them at least 1."""
    assert format_size(size) == label


def test_image_too_large_message_below_one_megabyte() -> None:
    """Test a sub-megabyte limit is not reported as 0MB."""
    message = str(ImageTooLargeError(2000, 1000))
    assert "less than 1000 bytes" in message
    assert "0MB" not in message
