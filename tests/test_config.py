#!/usr/bin/env python3
"""Tests for configuration loading."""
import importlib
import os

import pytest

from clipshare import config


@pytest.fixture
def reload_config(monkeypatch, tmp_path):
    """Reload clipshare.config from an empty working directory, then restore it."""
    monkeypatch.chdir(tmp_path)
    for name in ("CLIPSHARE_PORT", "CLIPSHARE_MIRROR_CLIPBOARD", "CLIPSHARE_POLL_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    for name in ("CLIPSHARE_PORT", "CLIPSHARE_MIRROR_CLIPBOARD", "CLIPSHARE_POLL_INTERVAL"):
        os.environ.pop(name, None)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config) -> None:
    """Test the built-in defaults with no environment."""
    cfg = reload_config()
    assert cfg.PORT == 5555
    assert cfg.POLL_INTERVAL == 5.0
    assert cfg.MAX_IMAGE_BYTES == 5 * 1024 * 1024
    assert cfg.MAX_CONTENT_LENGTH is None
    assert cfg.MIRROR_CLIPBOARD is False


def test_environment_overrides(reload_config, monkeypatch) -> None:
    """Test CLIPSHARE_* variables replace the defaults."""
    monkeypatch.setenv("CLIPSHARE_PORT", "6000")
    monkeypatch.setenv("CLIPSHARE_MIRROR_CLIPBOARD", "yes")
    monkeypatch.setenv("CLIPSHARE_POLL_INTERVAL", "1")
    cfg = reload_config()
    assert cfg.PORT == 6000
    assert cfg.MIRROR_CLIPBOARD is True
    assert cfg.POLL_INTERVAL == 1.0


def test_dotenv_file_is_loaded(reload_config, tmp_path) -> None:
    """Test a .env file in the working directory supplies settings."""
    (tmp_path / ".env").write_text("CLIPSHARE_PORT=7000\nCLIPSHARE_MIRROR_CLIPBOARD=true\n")
    cfg = reload_config()
    assert cfg.PORT == 7000
    assert cfg.MIRROR_CLIPBOARD is True


def test_environment_beats_dotenv(reload_config, monkeypatch, tmp_path) -> None:
    """Test a variable already in the environment is not replaced by .env."""
    (tmp_path / ".env").write_text("CLIPSHARE_PORT=7000\n")
    monkeypatch.setenv("CLIPSHARE_PORT", "8000")
    assert reload_config().PORT == 8000


def test_defaults_dict_matches_module(reload_config) -> None:
    """Test defaults() reports the module-level values."""
    cfg = reload_config()
    assert cfg.defaults()["PORT"] == cfg.PORT
    assert cfg.defaults()["MAX_IMAGE_BYTES"] == cfg.MAX_IMAGE_BYTES
