from abc import ABC, abstractmethod
from typing import Optional

from subscription.domain.subscription import UserSubscription


class SubscriptionRepositoryPort(ABC):

    @abstractmethod
    def get_subscription(self, user_id: str) -> Optional[UserSubscription]:
        pass
