from dataclasses import dataclass
from datetime import datetime
from typing import Optional

TIER_FREE = "free"
TIER_PAID = "paid"

STATUS_ACTIVE = "active"
STATUS_CANCELED = "canceled"
STATUS_PAST_DUE = "past_due"


@dataclass
class UserSubscription:
    user_id: str
    tier: str = TIER_FREE
    status: str = STATUS_ACTIVE
    current_period_end: Optional[datetime] = None

    @property
    def is_paid_active(self) -> bool:
        return self.tier == TIER_PAID and self.status == STATUS_ACTIVE
