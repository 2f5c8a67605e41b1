import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from creator.application.port.creator_repository_port import CreatorRepositoryPort
from creator.application.usecase.freshness_classifier import FreshnessClassifier
from creator.application.usecase.stats_aggregator import StatsAggregator
from creator.application.usecase.video_selector import VideoSelector
from creator.domain.creator_aggregate import CreatorAggregate
from creator.domain.creator_profile import CreatorProfile, normalize_username
from creator.domain.exceptions import CreatorNotFoundError
from creator.domain.platform import Platform
from creator.domain.video import Video
from subscription.application.usecase.entitlement_resolver import EntitlementResolver

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreatorAggregationUseCase:
    def __init__(
        self,
        repository: CreatorRepositoryPort,
        entitlement_resolver: EntitlementResolver,
        video_selector: VideoSelector,
        stats_aggregator: StatsAggregator,
        freshness_classifier: FreshnessClassifier,
        clock: Callable[[], datetime] = _utcnow,
    ):
        # 한국어 주석: 프로필 조회 이후 단계(한도/영상, 통계)는 서로 독립이므로 병렬로 실행합니다.
        self.repository = repository
        self.entitlement_resolver = entitlement_resolver
        self.video_selector = video_selector
        self.stats_aggregator = stats_aggregator
        self.freshness_classifier = freshness_classifier
        self.clock = clock

    async def aggregate(
        self,
        platform: str | Platform,
        username: str,
        user_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> CreatorAggregate:
        """
        크리에이터 프로필 + 노출 한도 내 영상 + 전체 이력 통계 + 캐시 신선도를 하나로 묶어 반환한다.
        - 입력 오류: InvalidInputError (저장소 접근 전)
        - 프로필 없음: CreatorNotFoundError (영상/구독 저장소는 호출하지 않음)
        - 저장소 장애: UpstreamUnavailableError 그대로 전파
        """
        platform = Platform.parse(platform)
        username = normalize_username(username)

        profile = await asyncio.to_thread(self.repository.get_profile_by_username, username, platform)
        if profile is None:
            logger.info("[CREATOR-AGG] profile not found | platform=%s, username=%s", platform.value, username)
            raise CreatorNotFoundError(platform.value, username)

        videos_task = asyncio.create_task(self._select_within_limit(profile, user_id))
        stats_task = asyncio.create_task(
            asyncio.to_thread(self.stats_aggregator.compute_stats, profile.profile_id)
        )
        tasks = (videos_task, stats_task)
        try:
            (video_limit, videos), stats = await asyncio.gather(*tasks)
        except BaseException:
            # 한쪽 실패 또는 호출 측 취소 시 남은 작업을 정리한다.
            # 이미 스레드에서 실행 중인 쿼리는 멈추지 않으며 DB statement_timeout으로 끊긴다.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        freshness = self.freshness_classifier.classify(profile.last_scraped_at, now or self.clock())
        logger.debug(
            "[CREATOR-AGG] done | platform=%s, username=%s, videos=%d/%d, freshness=%s",
            platform.value,
            username,
            len(videos),
            stats.total_videos,
            freshness.value,
        )
        return CreatorAggregate(
            profile=profile,
            videos=videos,
            stats=stats,
            freshness=freshness,
            video_limit=video_limit,
        )

    async def _select_within_limit(
        self, profile: CreatorProfile, user_id: Optional[str]
    ) -> tuple[int, list[Video]]:
        video_limit = await asyncio.to_thread(self.entitlement_resolver.resolve_limit, user_id)
        videos = await asyncio.to_thread(self.video_selector.select_videos, profile.profile_id, video_limit)
        return video_limit, videos
