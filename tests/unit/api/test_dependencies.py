"""Unit tests for the API dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from restaurant_guide.api.dependencies import get_current_user_id
from restaurant_guide.core.config import Settings
from restaurant_guide.core.exceptions import UnauthorizedException
from restaurant_guide.factory import create_app
from restaurant_guide.observability.logging import clear_context, get_context


if TYPE_CHECKING:
    from collections.abc import Iterator

    from restaurant_guide.core.config import StorageSettings
    from restaurant_guide.services import GuideServices


pytestmark = pytest.mark.unit

API = "/api/v1"


def _request(user_id: str) -> Request:
    return Request({"type": "http", "headers": [(b"x-user-id", user_id.encode())]})


@pytest.fixture
def custom_header_client(
    storage_settings: StorageSettings, services: GuideServices
) -> Iterator[TestClient]:
    settings = Settings(
        APP_ENV="test",
        storage=storage_settings.model_dump(),
        auth={"user_id_header": "X-Customer"},
    )
    with TestClient(create_app(settings=settings, services=services)) as client:
        yield client


class TestCurrentUser:
    """Tests for get_current_user_id."""

    def test_empty_header(self, client: TestClient):
        """Should answer 401 for an empty header."""
        response = client.get(f"{API}/me/favorites", headers={"X-User-ID": ""})

        assert response.status_code == 401

    def test_identity_is_trimmed(self, test_settings: Settings):
        """Should strip spaces around the identity and bind it to the logs."""
        user_id = get_current_user_id(_request("  mrossi "), test_settings)

        assert user_id == "mrossi"
        assert get_context()["user_id"] == "mrossi"
        clear_context()

    def test_blank_identity(self, test_settings: Settings):
        """Should refuse an identity made of spaces."""
        with pytest.raises(UnauthorizedException):
            get_current_user_id(_request("   "), test_settings)

    def test_configured_header(self, custom_header_client: TestClient):
        """Should read the identity from the configured header only."""
        ok = custom_header_client.get(
            f"{API}/me/favorites", headers={"X-Customer": "mrossi"}
        )
        default = custom_header_client.get(
            f"{API}/me/favorites", headers={"X-User-ID": "mrossi"}
        )

        assert ok.status_code == 200
        assert default.status_code == 401
        assert "X-Customer" in default.json()["message"]
