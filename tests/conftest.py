"""Pytest fixtures for clipshare tests."""
import pytest

from clipshare.server import create_app
from clipshare.store import SharedStore


@pytest.fixture
def store() -> SharedStore:
    """Create a fresh SharedStore."""
    return SharedStore()


@pytest.fixture
def app(store):
    """Flask app wired to the ``store`` fixture."""
    app = create_app(store=store, settings={"TESTING": True, "MIRROR_CLIPBOARD": False})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_file(tmp_path):
    """A small file with PNG magic bytes."""
    path = tmp_path / "shot.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 32)
    return path
