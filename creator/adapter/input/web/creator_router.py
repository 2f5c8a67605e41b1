import asyncio
import logging
from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from config.settings import EntitlementSettings, FreshnessSettings, RequestSettings
from creator.application.usecase.creator_aggregation_usecase import CreatorAggregationUseCase
from creator.application.usecase.freshness_classifier import FreshnessClassifier
from creator.application.usecase.stats_aggregator import StatsAggregator
from creator.application.usecase.video_selector import VideoSelector
from creator.domain.exceptions import CreatorNotFoundError, InvalidInputError, UpstreamUnavailableError
from creator.infrastructure.repository.creator_repository_impl import CreatorRepositoryImpl
from social_oauth.adapter.input.web.current_user import get_optional_user_id
from subscription.application.usecase.entitlement_resolver import EntitlementResolver
from subscription.infrastructure.repository.subscription_repository_impl import SubscriptionRepositoryImpl

logger = logging.getLogger(__name__)

creator_router = APIRouter(tags=["creators"])

_aggregation_usecase: CreatorAggregationUseCase | None = None


def get_creator_aggregation_usecase() -> CreatorAggregationUseCase:
    """최초 요청 시 저장소/유즈케이스를 조립해 재사용한다."""
    global _aggregation_usecase
    if _aggregation_usecase is not None:
        return _aggregation_usecase
    repository = CreatorRepositoryImpl()
    freshness_settings = FreshnessSettings()
    _aggregation_usecase = CreatorAggregationUseCase(
        repository=repository,
        entitlement_resolver=EntitlementResolver(SubscriptionRepositoryImpl(), EntitlementSettings()),
        video_selector=VideoSelector(repository),
        stats_aggregator=StatsAggregator(repository),
        freshness_classifier=FreshnessClassifier(timedelta(hours=freshness_settings.stale_after_hours)),
    )
    return _aggregation_usecase


def get_request_settings() -> RequestSettings:
    return RequestSettings()


@creator_router.get("/{platform}/{username}")
async def get_creator(
    platform: str,
    username: str,
    user_id: Optional[str] = Depends(get_optional_user_id),
    usecase: CreatorAggregationUseCase = Depends(get_creator_aggregation_usecase),
    request_settings: RequestSettings = Depends(get_request_settings),
):
    """
    크리에이터 프로필, 노출 한도 내 영상(참여율 내림차순), 전체 이력 통계, 캐시 신선도를 조회한다.
    - platform: tiktok | instagram | youtube
    - 비로그인 요청은 기본 한도(20개) 적용
    """
    try:
        result = await asyncio.wait_for(
            usecase.aggregate(platform, username, user_id=user_id),
            timeout=request_settings.creator_timeout_seconds,
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except CreatorNotFoundError:
        raise HTTPException(status_code=404, detail="Creator not found")
    except UpstreamUnavailableError:
        # 원본 오류는 로그에만 남기고 응답에는 노출하지 않는다.
        logger.exception("[CREATOR-API] upstream unavailable | platform=%s, username=%s", platform, username)
        raise HTTPException(status_code=503, detail="Service temporarily unavailable")
    except asyncio.TimeoutError:
        logger.warning("[CREATOR-API] request timed out | platform=%s, username=%s", platform, username)
        raise HTTPException(status_code=504, detail="Request timed out")
    except Exception:
        logger.exception("[CREATOR-API] unexpected failure | platform=%s, username=%s", platform, username)
        raise HTTPException(status_code=500, detail="Internal server error")
    # datetime 등이 JSON 직렬화 오류를 내지 않도록 변환
    return JSONResponse(jsonable_encoder(result.to_dict()))
