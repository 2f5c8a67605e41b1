"""Tests for the HTTP routers."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from app.main import app
from config.settings import RequestSettings
from creator.adapter.input.web.creator_router import get_creator_aggregation_usecase, get_request_settings
from creator.domain.exceptions import UpstreamUnavailableError
from social_oauth.adapter.input.web.current_user import get_optional_user_id
from subscription.adapter.input.web.subscription_router import get_entitlement_resolver
from subscription.application.usecase.entitlement_resolver import EntitlementResolver

from conftest import build_usecase


@pytest.fixture
def client(creator_repository, subscription_repository):
    app.dependency_overrides[get_creator_aggregation_usecase] = lambda: build_usecase(
        creator_repository, subscription_repository
    )
    app.dependency_overrides[get_entitlement_resolver] = lambda: EntitlementResolver(subscription_repository)
    app.dependency_overrides[get_optional_user_id] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    """Test health endpoint."""
    assert client.get("/health").json() == {"status": "ok"}


def test_creator_payload_shape(client) -> None:
    """Test anonymous creator lookup returns the aggregate payload."""
    response = client.get("/creators/tiktok/Alice")

    assert response.status_code == 200
    body = response.json()
    assert body["videoLimit"] == 20
    assert len(body["videos"]) == 20
    assert body["profile"]["username"] == "alice"
    assert body["stats"]["totalVideos"] == 25
    assert set(body["stats"]["postingFrequency"]) == {"perWeek", "perMonth"}
    assert body["freshness"] == "fresh"
    assert body["cacheTimestamp"].startswith("2025-06-01T10:00:00")


def test_paid_user_sees_more(client) -> None:
    """Test the session user id flows into the entitlement."""
    app.dependency_overrides[get_optional_user_id] = lambda: "paid-user"

    body = client.get("/creators/tiktok/alice").json()

    assert body["videoLimit"] == 40
    assert len(body["videos"]) == 25


def test_creator_not_found(client) -> None:
    """Test unknown creators map to 404."""
    response = client.get("/creators/instagram/alice")
    assert response.status_code == 404
    assert response.json() == {"detail": "Creator not found"}


def test_invalid_platform(client) -> None:
    """Test unsupported platforms map to 400."""
    assert client.get("/creators/myspace/alice").status_code == 400


def test_upstream_failure_hides_details(client) -> None:
    """Test store outages map to 503 without leaking the cause."""
    usecase = Mock()
    usecase.aggregate = AsyncMock(side_effect=UpstreamUnavailableError("video_store", "password=hunter2"))
    app.dependency_overrides[get_creator_aggregation_usecase] = lambda: usecase

    response = client.get("/creators/tiktok/alice")

    assert response.status_code == 503
    assert "hunter2" not in response.text
    assert "video_store" not in response.text


def test_unexpected_failure_is_generic_500(client) -> None:
    """Test unknown errors map to a generic 500."""
    usecase = Mock()
    usecase.aggregate = AsyncMock(side_effect=RuntimeError("boom at 10.0.0.3"))
    app.dependency_overrides[get_creator_aggregation_usecase] = lambda: usecase

    response = client.get("/creators/tiktok/alice")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_request_deadline(client) -> None:
    """Test the per-request timeout maps to 504."""

    async def slow_aggregate(*args, **kwargs):
        await asyncio.sleep(1)

    usecase = Mock()
    usecase.aggregate = slow_aggregate
    app.dependency_overrides[get_creator_aggregation_usecase] = lambda: usecase
    app.dependency_overrides[get_request_settings] = lambda: RequestSettings(creator_timeout_seconds=0.01)

    assert client.get("/creators/tiktok/alice").status_code == 504


def test_video_limit_requires_login(client) -> None:
    """Test the video-limit endpoint rejects anonymous callers."""
    assert client.get("/subscriptions/me/video-limit").status_code == 401


@pytest.mark.parametrize("user_id,expected", [("paid-user", 40), ("free-user", 20), ("lapsed-user", 20)])
def test_video_limit_for_user(client, user_id: str, expected: int) -> None:
    """Test the video-limit endpoint reports the resolved entitlement."""
    app.dependency_overrides[get_optional_user_id] = lambda: user_id

    response = client.get("/subscriptions/me/video-limit")

    assert response.status_code == 200
    assert response.json() == {"videoLimit": expected}
