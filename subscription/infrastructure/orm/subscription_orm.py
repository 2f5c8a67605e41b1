from datetime import datetime

from sqlalchemy import Column, String, DateTime

from config.database.session import Base


class UserSubscriptionORM(Base):
    __tablename__ = "user_subscription"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), unique=True, index=True, nullable=False)
    stripe_customer_id = Column(String(255))
    stripe_subscription_id = Column(String(255))
    subscription_tier = Column(String(20), nullable=False, default="free")
    status = Column(String(20), nullable=False, default="active")
    current_period_end = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)
