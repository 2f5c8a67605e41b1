import logging
from datetime import datetime, timezone

from sqlalchemy import case, literal
from sqlalchemy.exc import SQLAlchemyError

from config.database.session import SessionLocal
from creator.application.port.creator_repository_port import CreatorRepositoryPort
from creator.domain.creator_profile import CreatorProfile
from creator.domain.exceptions import InvalidInputError, UpstreamUnavailableError
from creator.domain.platform import Platform
from creator.domain.video import ORDERABLE_FIELDS, Video
from creator.infrastructure.orm.models import CreatorProfileORM, ShortVideoORM

logger = logging.getLogger(__name__)

# 저장된 engagement_rate 컬럼 대신 카운트로 계산한 값으로 정렬한다.
_ENGAGEMENT_EXPR = case(
    (ShortVideoORM.views == 0, literal(0.0)),
    else_=(ShortVideoORM.likes + ShortVideoORM.comments) * 100.0 / ShortVideoORM.views,
)

_ORDER_COLUMNS = {
    "engagement_rate": _ENGAGEMENT_EXPR,
    "views": ShortVideoORM.views,
    "likes": ShortVideoORM.likes,
    "comments": ShortVideoORM.comments,
    "posted_at": ShortVideoORM.posted_at,
}


class CreatorRepositoryImpl(CreatorRepositoryPort):
    def __init__(self, session_factory=SessionLocal):
        # 한국어 주석: 호출마다 세션을 새로 열어 병렬 조회(to_thread) 간에 세션이 공유되지 않게 합니다.
        self.session_factory = session_factory

    def get_profile_by_username(self, username: str, platform: Platform) -> CreatorProfile | None:
        try:
            with self.session_factory() as db:
                orm = (
                    db.query(CreatorProfileORM)
                    .filter(
                        CreatorProfileORM.username == username.lower(),
                        CreatorProfileORM.platform == platform.value,
                    )
                    .one_or_none()
                )
                return self._profile_to_domain(orm) if orm is not None else None
        except SQLAlchemyError as exc:
            logger.warning("[CREATOR-REPO] profile lookup failed | platform=%s, username=%s", platform.value, username)
            raise UpstreamUnavailableError("profile_store") from exc

    def get_videos(
        self,
        profile_id: str,
        limit: int,
        order_by: str = "engagement_rate",
        order_direction: str = "desc",
    ) -> list[Video]:
        if order_by not in ORDERABLE_FIELDS:
            raise InvalidInputError(f"unsupported order_by: {order_by!r}")
        primary = self._primary_order(order_by, order_direction)
        try:
            with self.session_factory() as db:
                rows = (
                    db.query(ShortVideoORM)
                    .filter(ShortVideoORM.profile_id == profile_id)
                    .order_by(
                        primary,
                        ShortVideoORM.posted_at.desc().nulls_last(),
                        ShortVideoORM.video_id.asc(),
                    )
                    .limit(limit)
                    .all()
                )
                return [self._video_to_domain(r) for r in rows]
        except SQLAlchemyError as exc:
            logger.warning("[CREATOR-REPO] video query failed | profile_id=%s", profile_id)
            raise UpstreamUnavailableError("video_store") from exc

    def list_all_videos(self, profile_id: str) -> list[Video]:
        try:
            with self.session_factory() as db:
                rows = db.query(ShortVideoORM).filter(ShortVideoORM.profile_id == profile_id).all()
                return [self._video_to_domain(r) for r in rows]
        except SQLAlchemyError as exc:
            logger.warning("[CREATOR-REPO] full video history query failed | profile_id=%s", profile_id)
            raise UpstreamUnavailableError("video_store") from exc

    @staticmethod
    def _primary_order(order_by: str, order_direction: str):
        column = _ORDER_COLUMNS[order_by]
        if order_direction == "asc":
            # 게시일 없는 영상은 오름차순에서 맨 앞, 내림차순에서 맨 뒤 (LIMIT 전에 DB 기본 NULL 순서를 고정)
            return column.asc().nulls_first()
        return column.desc().nulls_last()

    @staticmethod
    def _profile_to_domain(orm: CreatorProfileORM) -> CreatorProfile:
        return CreatorProfile(
            profile_id=orm.id,
            platform=Platform.parse(orm.platform),
            username=orm.username,
            display_name=orm.display_name,
            avatar_url=orm.avatar_url,
            follower_count=orm.follower_count,
            last_scraped_at=CreatorRepositoryImpl._to_utc(orm.last_scraped_at),
            created_at=CreatorRepositoryImpl._to_utc(orm.created_at),
            updated_at=CreatorRepositoryImpl._to_utc(orm.updated_at),
        )

    @staticmethod
    def _video_to_domain(orm: ShortVideoORM) -> Video:
        return Video(
            video_id=orm.video_id,
            profile_id=orm.profile_id,
            platform=Platform.parse(orm.platform),
            video_url=orm.video_url,
            description=orm.description,
            thumbnail_url=orm.thumbnail_url,
            view_count=orm.views or 0,
            like_count=orm.likes or 0,
            comment_count=orm.comments or 0,
            share_count=orm.shares,
            posted_at=CreatorRepositoryImpl._to_utc(orm.posted_at),
            duration_seconds=orm.duration_seconds,
        )

    @staticmethod
    def _to_utc(dt: datetime | None) -> datetime | None:
        """타임존 여부에 따라 UTC aware datetime으로 변환한다."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
