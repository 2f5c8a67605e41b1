from typing import Optional

from config.settings import EntitlementSettings
from subscription.application.port.subscription_repository_port import SubscriptionRepositoryPort


class EntitlementResolver:
    def __init__(
        self,
        subscription_repository: SubscriptionRepositoryPort,
        settings: Optional[EntitlementSettings] = None,
    ):
        # 한도 값은 EntitlementSettings 한 곳에서만 관리한다.
        self.repo = subscription_repository
        self.settings = settings or EntitlementSettings()

    def resolve_limit(self, user_id: Optional[str]) -> int:
        """
        구독 상태로 노출 가능한 영상 개수를 결정한다.
        - 비로그인: anonymous_video_limit (구독 저장소 조회 없음)
        - paid + active: paid_video_limit
        - 그 외(free, 해지/연체된 paid, 구독 레코드 없음): free_video_limit
        """
        if user_id is None:
            return self.settings.anonymous_video_limit
        subscription = self.repo.get_subscription(user_id)
        if subscription is not None and subscription.is_paid_active:
            return self.settings.paid_video_limit
        return self.settings.free_video_limit
