"""Shared fixtures and in-memory stores for tests."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from creator.application.port.creator_repository_port import CreatorRepositoryPort
from creator.application.usecase.creator_aggregation_usecase import CreatorAggregationUseCase
from creator.application.usecase.freshness_classifier import FreshnessClassifier
from creator.application.usecase.stats_aggregator import StatsAggregator
from creator.application.usecase.video_selector import VideoSelector, ranking_key
from creator.domain.creator_profile import CreatorProfile
from creator.domain.platform import Platform
from creator.domain.video import Video
from subscription.application.port.subscription_repository_port import SubscriptionRepositoryPort
from subscription.application.usecase.entitlement_resolver import EntitlementResolver
from subscription.domain.subscription import UserSubscription

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_video(
    video_id: str,
    views: int = 1000,
    likes: int = 100,
    comments: int = 10,
    posted_day: Optional[int] = 0,
    profile_id: str = "profile-alice",
    platform: Platform = Platform.TIKTOK,
) -> Video:
    return Video(
        video_id=video_id,
        profile_id=profile_id,
        platform=platform,
        video_url=f"https://example.com/{video_id}",
        view_count=views,
        like_count=likes,
        comment_count=comments,
        posted_at=EPOCH + timedelta(days=posted_day) if posted_day is not None else None,
    )


def make_profile(
    username: str = "alice",
    platform: Platform = Platform.TIKTOK,
    last_scraped_at: Optional[datetime] = None,
) -> CreatorProfile:
    return CreatorProfile(
        profile_id=f"profile-{username}",
        platform=platform,
        username=username,
        display_name=username.title(),
        last_scraped_at=last_scraped_at,
    )


class InMemoryCreatorRepository(CreatorRepositoryPort):
    """Creator store that returns pages in reverse order to exercise re-sorting."""

    def __init__(self, profiles=(), videos=()):
        self.profiles = list(profiles)
        self.videos = list(videos)
        self.calls: list[str] = []

    def get_profile_by_username(self, username, platform):
        self.calls.append("get_profile_by_username")
        for profile in self.profiles:
            if profile.username == username and profile.platform == platform:
                return profile
        return None

    def get_videos(self, profile_id, limit, order_by="engagement_rate", order_direction="desc"):
        self.calls.append("get_videos")
        owned = [v for v in self.videos if v.profile_id == profile_id]
        page = sorted(owned, key=ranking_key(order_by, order_direction))[:limit]
        return list(reversed(page))

    def list_all_videos(self, profile_id):
        self.calls.append("list_all_videos")
        return [v for v in self.videos if v.profile_id == profile_id]


class InMemorySubscriptionRepository(SubscriptionRepositoryPort):
    def __init__(self, subscriptions=()):
        self.subscriptions = {s.user_id: s for s in subscriptions}
        self.calls: list[str] = []

    def get_subscription(self, user_id: str) -> Optional[UserSubscription]:
        self.calls.append(user_id)
        return self.subscriptions.get(user_id)


def build_usecase(
    creator_repository: CreatorRepositoryPort,
    subscription_repository: SubscriptionRepositoryPort,
) -> CreatorAggregationUseCase:
    return CreatorAggregationUseCase(
        repository=creator_repository,
        entitlement_resolver=EntitlementResolver(subscription_repository),
        video_selector=VideoSelector(creator_repository),
        stats_aggregator=StatsAggregator(creator_repository),
        freshness_classifier=FreshnessClassifier(),
        clock=lambda: NOW,
    )


@pytest.fixture
def alice_videos() -> list[Video]:
    """25 videos over 25 consecutive days; the last five have zero views."""
    videos = [
        make_video(f"v{i:02d}", views=1000, likes=10 * (i + 1), comments=i, posted_day=i)
        for i in range(20)
    ]
    videos += [
        make_video(f"z{i:02d}", views=0, likes=0, comments=0, posted_day=20 + i)
        for i in range(5)
    ]
    return videos


@pytest.fixture
def creator_repository(alice_videos) -> InMemoryCreatorRepository:
    return InMemoryCreatorRepository(
        profiles=[make_profile("alice", last_scraped_at=NOW - timedelta(hours=2))],
        videos=alice_videos,
    )


@pytest.fixture
def subscription_repository() -> InMemorySubscriptionRepository:
    return InMemorySubscriptionRepository(
        [
            UserSubscription(user_id="free-user", tier="free", status="active"),
            UserSubscription(user_id="paid-user", tier="paid", status="active"),
            UserSubscription(user_id="lapsed-user", tier="paid", status="past_due"),
        ]
    )
