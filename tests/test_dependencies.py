"""
Test suite for dependency injection container.

Tests identity resolution and service construction.

System role: Verification of DI container
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import Request

from bg_remover.api.deps import get_bg_removal_job_service, get_current_user
from bg_remover.application.services import BgRemovalJobService
from bg_remover.configs import Settings
from bg_remover.configs.auth import AuthSettings
from bg_remover.main import create_app
from bg_remover.models.auth import AuthenticatedUser


def _request(headers: dict[str, str] | None = None, user=None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [
            (name.lower().encode(), value.encode()) for name, value in (headers or {}).items()
        ],
        "state": {},
    }
    request = Request(scope)
    if user is not None:
        request.state.user = user
    return request


@pytest.fixture
def settings() -> Settings:
    """Provide settings with the default identity header."""
    return Settings(auth=AuthSettings(user_header="X-User-ID"))


class TestGetCurrentUser:
    """Test suite for get_current_user."""

    def test_returns_none_without_identity(self, settings: Settings) -> None:
        assert get_current_user(_request(), settings) is None

    def test_reads_forwarded_header(self, settings: Settings) -> None:
        user = get_current_user(_request({"X-User-ID": "user-alice"}), settings)

        assert user == AuthenticatedUser(id="user-alice")

    def test_blank_header_is_anonymous(self, settings: Settings) -> None:
        assert get_current_user(_request({"X-User-ID": "   "}), settings) is None

    def test_honours_configured_header_name(self) -> None:
        custom = Settings(auth=AuthSettings(user_header="X-Auth-Subject"))

        user = get_current_user(_request({"X-Auth-Subject": "user-bob"}), custom)

        assert user.id == "user-bob"
        assert get_current_user(_request({"X-User-ID": "user-bob"}), custom) is None

    def test_prefers_user_set_by_middleware(self, settings: Settings) -> None:
        request = _request({"X-User-ID": "header-user"}, user=AuthenticatedUser(id="state-user"))

        assert get_current_user(request, settings).id == "state-user"

    def test_accepts_any_object_with_id_on_state(self, settings: Settings) -> None:
        request = _request(user=SimpleNamespace(id=42))

        assert get_current_user(request, settings) == AuthenticatedUser(id="42")


class TestGetBgRemovalJobService:
    """Test suite for get_bg_removal_job_service factory."""

    def test_binds_service_to_session(self) -> None:
        db = AsyncMock(spec=AsyncSession)

        service = get_bg_removal_job_service(db=db)

        assert isinstance(service, BgRemovalJobService)
        assert service.db is db


class TestSettings:
    """Test suite for the shared settings fields."""

    def test_log_level_is_normalised(self) -> None:
        assert Settings(log_level=" warning ").log_level == "WARNING"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="verbose")

    def test_unknown_environment_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_cors_origins_feed_the_app(self) -> None:
        app = create_app(Settings(cors_origins=["https://app.example"]))

        cors = next(m for m in app.user_middleware if m.cls is CORSMiddleware)
        assert cors.kwargs["allow_origins"] == ["https://app.example"]
