from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from creator.domain.platform import Platform

ORDERABLE_FIELDS = ("engagement_rate", "views", "likes", "comments", "posted_at")


def calculate_engagement_rate(likes: int | None, comments: int | None, views: int | None) -> float:
    """
    (likes + comments) / views * 100. 조회수가 0이면 0으로 정의한다.
    """
    if not views:
        return 0.0
    return ((likes or 0) + (comments or 0)) / views * 100


@dataclass
class Video:
    """
    TikTok 영상 / Instagram 릴스 / YouTube 쇼츠를 하나로 다루는 숏폼 영상 모델입니다.
    engagement_rate는 저장값을 쓰지 않고 항상 카운트로부터 다시 계산합니다.
    """
    video_id: str
    profile_id: str
    platform: Platform
    video_url: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    share_count: Optional[int] = None
    posted_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None

    @property
    def engagement_rate(self) -> float:
        return calculate_engagement_rate(self.like_count, self.comment_count, self.view_count)

    def sort_value(self, field: str):
        if field == "engagement_rate":
            return self.engagement_rate
        if field == "views":
            return self.view_count
        if field == "likes":
            return self.like_count
        if field == "comments":
            return self.comment_count
        if field == "posted_at":
            return self.posted_at.timestamp() if self.posted_at else float("-inf")
        raise KeyError(field)

    def to_dict(self) -> dict:
        return {
            "video_id": self.video_id,
            "profile_id": self.profile_id,
            "platform": self.platform.value,
            "video_url": self.video_url,
            "description": self.description,
            "thumbnail_url": self.thumbnail_url,
            "views": self.view_count,
            "likes": self.like_count,
            "comments": self.comment_count,
            "shares": self.share_count,
            "engagement_rate": round(self.engagement_rate, 4),
            "posted_at": self.posted_at,
            "duration_seconds": self.duration_seconds,
        }
