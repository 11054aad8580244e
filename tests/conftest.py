"""Shared test fixtures for the restaurant guide tests.

Every fixture that touches files works on ``tmp_path``, so tests never see
each other's data or the real data directory.
"""

from __future__ import annotations

import os

# Must be set before any settings are loaded.
os.environ.setdefault("APP_ENV", "test")

from typing import TYPE_CHECKING

import pytest

from restaurant_guide.core.config import Settings, StorageSettings
from restaurant_guide.services import GuideServices
from tests.fixtures.catalog import CATALOG_CSV


if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty data directory for one test."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def storage_settings(data_dir: Path) -> StorageSettings:
    return StorageSettings(data_dir=data_dir)


@pytest.fixture
def catalog_file(storage_settings: StorageSettings) -> Path:
    """Sample catalog with current rows, a legacy row and a short row."""
    path = storage_settings.catalog_path
    path.write_text(CATALOG_CSV, encoding="utf-8")
    return path


@pytest.fixture
def services(storage_settings: StorageSettings, catalog_file: Path) -> GuideServices:
    """Services loaded from the sample catalog, with no other data."""
    return GuideServices.from_storage(storage_settings)


@pytest.fixture
def empty_services(storage_settings: StorageSettings) -> GuideServices:
    """Services on an empty data directory."""
    return GuideServices.from_storage(storage_settings)


@pytest.fixture
def test_settings(storage_settings: StorageSettings) -> Settings:
    """Settings pointing at the temporary data directory."""
    return Settings(
        APP_ENV="test",
        storage=storage_settings.model_dump(),
    )
