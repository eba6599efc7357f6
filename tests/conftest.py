"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from fsfix.config import FsfixConfig

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def _clean_fsfix_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("FSFIX_TEMP_DIR", "FSFIX_KEEP", "FSFIX_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated stand-in for the platform temp directory."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def config(temp_root: Path) -> FsfixConfig:
    """Default config whose trees are created under ``temp_root``."""
    return FsfixConfig()
