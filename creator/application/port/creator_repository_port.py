from abc import ABC, abstractmethod

from creator.domain.creator_profile import CreatorProfile
from creator.domain.platform import Platform
from creator.domain.video import Video


class CreatorRepositoryPort(ABC):
    """
    수집 파이프라인이 적재한 프로필/영상을 읽기 전용으로 조회하는 포트입니다.
    저장소 장애는 UpstreamUnavailableError로 올려야 합니다.
    """

    @abstractmethod
    def get_profile_by_username(self, username: str, platform: Platform) -> CreatorProfile | None:
        raise NotImplementedError

    @abstractmethod
    def get_videos(
        self,
        profile_id: str,
        limit: int,
        order_by: str = "engagement_rate",
        order_direction: str = "desc",
    ) -> list[Video]:
        raise NotImplementedError

    # 통계 계산용: 노출 limit과 무관한 전체 이력
    @abstractmethod
    def list_all_videos(self, profile_id: str) -> list[Video]:
        raise NotImplementedError
