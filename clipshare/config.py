"""Configuration for clipshare. Every value can be overridden from the environment
or from a .env file in the working directory."""
import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


def _env_float(name, default):
    value = os.environ.get(name)
    return float(value) if value else default


# Server
HOST = os.environ.get("CLIPSHARE_HOST", "0.0.0.0")
PORT = _env_int("CLIPSHARE_PORT", 5555)

# Upper bound on request bodies, enforced by Flask (None = no limit)
MAX_CONTENT_LENGTH = _env_int("CLIPSHARE_MAX_CONTENT_LENGTH", None)

# Copy every shared text into the server host's clipboard
MIRROR_CLIPBOARD = _env_bool("CLIPSHARE_MIRROR_CLIPBOARD", False)

# Clients
POLL_INTERVAL = _env_float("CLIPSHARE_POLL_INTERVAL", 5.0)
MAX_IMAGE_BYTES = _env_int("CLIPSHARE_MAX_IMAGE_BYTES", 5 * 1024 * 1024)
REQUEST_TIMEOUT = _env_float("CLIPSHARE_REQUEST_TIMEOUT", 3.0)


def defaults():
    """Return the module settings as a dict keyed by setting name."""
    return {
        "HOST": HOST,
        "PORT": PORT,
        "MAX_CONTENT_LENGTH": MAX_CONTENT_LENGTH,
        "MIRROR_CLIPBOARD": MIRROR_CLIPBOARD,
        "POLL_INTERVAL": POLL_INTERVAL,
        "MAX_IMAGE_BYTES": MAX_IMAGE_BYTES,
        "REQUEST_TIMEOUT": REQUEST_TIMEOUT,
    }
