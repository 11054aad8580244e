"""Fixtures for API tests.

The application is created with the test settings and the tmp_path-backed
services, and run through its lifespan by entering the TestClient.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from restaurant_guide.factory import create_app


if TYPE_CHECKING:
    from collections.abc import Iterator

    from restaurant_guide.core.config import Settings
    from restaurant_guide.services import GuideServices


API = "/api/v1"


@pytest.fixture
def client(test_settings: Settings, services: GuideServices) -> Iterator[TestClient]:
    app = create_app(settings=test_settings, services=services)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def as_user() -> dict[str, str]:
    return {"X-User-ID": "mrossi"}


@pytest.fixture
def as_owner() -> dict[str, str]:
    return {"X-User-ID": "owner1"}
