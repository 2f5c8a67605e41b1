import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from config.settings import EntitlementSettings
from shared.domain.exceptions import UpstreamUnavailableError
from social_oauth.adapter.input.web.current_user import require_user_id
from subscription.application.usecase.entitlement_resolver import EntitlementResolver
from subscription.infrastructure.repository.subscription_repository_impl import SubscriptionRepositoryImpl

logger = logging.getLogger(__name__)

subscription_router = APIRouter(tags=["subscription"])

_resolver: EntitlementResolver | None = None


class VideoLimitResponse(BaseModel):
    videoLimit: int = Field(ge=1, description="Maximum number of videos shown per creator")


def get_entitlement_resolver() -> EntitlementResolver:
    global _resolver
    if _resolver is None:
        _resolver = EntitlementResolver(SubscriptionRepositoryImpl(), EntitlementSettings())
    return _resolver


@subscription_router.get("/me/video-limit", response_model=VideoLimitResponse)
def get_video_limit(
    user_id: str = Depends(require_user_id),
    resolver: EntitlementResolver = Depends(get_entitlement_resolver),
):
    """로그인 사용자의 구독 등급 기준 영상 노출 한도를 조회한다."""
    try:
        video_limit = resolver.resolve_limit(user_id)
    except UpstreamUnavailableError:
        logger.exception("[SUBSCRIPTION-API] subscription store unavailable | user_id=%s", user_id)
        raise HTTPException(status_code=503, detail="Service temporarily unavailable")
    return VideoLimitResponse(videoLimit=video_limit)
