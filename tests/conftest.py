"""Shared fixtures for the error_utils test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest

from packages.error_utils.config import reset_settings
from packages.error_utils.logging import clear_context
from packages.error_utils.result import LocalStatusFlag


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Load settings from a clean environment and no config file for each test."""
    for key in list(os.environ):
        if key.startswith("ERROR_UTILS_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "packages.error_utils.config.loader.DEFAULT_CONFIG_PATH",
        tmp_path / "absent.yaml",
    )
    reset_settings()
    clear_context()
    yield
    reset_settings()
    clear_context()


@pytest.fixture
def status_flag() -> LocalStatusFlag:
    """Return a fresh thread-local status flag."""
    return LocalStatusFlag()
