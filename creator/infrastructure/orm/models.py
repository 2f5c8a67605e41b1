from datetime import datetime
from sqlalchemy import Column, String, Text, BigInteger, Integer, DateTime, Numeric, UniqueConstraint

from config.database.session import Base


class CreatorProfileORM(Base):
    __tablename__ = "creator_profile"
    __table_args__ = (
        UniqueConstraint("username", "platform", name="uq_creator_profile_username_platform"),
    )

    id = Column(String(36), primary_key=True)
    username = Column(String(255), nullable=False)
    platform = Column(String(50), nullable=False, default="tiktok")
    display_name = Column(String(255))
    avatar_url = Column(String(500))
    follower_count = Column(BigInteger)
    last_scraped_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)


class ShortVideoORM(Base):
    __tablename__ = "short_video"

    id = Column(String(36), primary_key=True)
    profile_id = Column(String(36), index=True, nullable=False)
    platform = Column(String(50), nullable=False, default="tiktok")
    video_id = Column(String(100), nullable=False, unique=True)
    video_url = Column(String(500), nullable=False)
    description = Column(Text)
    thumbnail_url = Column(String(500))
    views = Column(BigInteger, nullable=False, default=0)
    likes = Column(BigInteger, nullable=False, default=0)
    comments = Column(BigInteger, nullable=False, default=0)
    shares = Column(BigInteger)
    # 수집 시점에 파이프라인이 채우는 값. 조회 측에서는 신뢰하지 않고 카운트로 다시 계산한다.
    engagement_rate = Column(Numeric(10, 4))
    posted_at = Column(DateTime(timezone=True))
    duration_seconds = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
