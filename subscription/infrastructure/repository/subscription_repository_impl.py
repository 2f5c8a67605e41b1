import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from config.database.session import SessionLocal
from shared.domain.exceptions import UpstreamUnavailableError
from subscription.application.port.subscription_repository_port import SubscriptionRepositoryPort
from subscription.domain.subscription import UserSubscription
from subscription.infrastructure.orm.subscription_orm import UserSubscriptionORM

logger = logging.getLogger(__name__)


class SubscriptionRepositoryImpl(SubscriptionRepositoryPort):
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def get_subscription(self, user_id: str) -> Optional[UserSubscription]:
        try:
            with self.session_factory() as db:
                orm = (
                    db.query(UserSubscriptionORM)
                    .filter(UserSubscriptionORM.user_id == user_id)
                    .one_or_none()
                )
                if orm is None:
                    return None
                return self._to_domain(orm)
        except SQLAlchemyError as exc:
            logger.warning("[SUBSCRIPTION-REPO] lookup failed | user_id=%s", user_id)
            raise UpstreamUnavailableError("subscription_store") from exc

    @staticmethod
    def _to_domain(orm: UserSubscriptionORM) -> UserSubscription:
        return UserSubscription(
            user_id=orm.user_id,
            tier=orm.subscription_tier,
            status=orm.status,
            current_period_end=orm.current_period_end,
        )
