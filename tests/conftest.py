"""Shared fixtures for project store tests."""

import os
from pathlib import Path

import pytest

from project_store.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from PROJECT_STORE_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("PROJECT_STORE_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "projects.json"
