from dataclasses import dataclass, field
from typing import Optional

from creator.domain.video import Video


@dataclass
class PostingFrequency:
    per_week: float = 0.0
    per_month: float = 0.0

    def to_dict(self) -> dict:
        return {"perWeek": self.per_week, "perMonth": self.per_month}


@dataclass
class AggregateStats:
    """
    크리에이터 전체 영상 이력 기반 집계 결과입니다.
    화면 노출 개수 제한과 무관하게 항상 전체 영상으로 다시 계산합니다.
    """
    total_videos: int = 0
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    average_views: int = 0
    average_likes: int = 0
    average_engagement_rate: float = 0.0
    median_engagement_rate: float = 0.0
    best_video: Optional[Video] = None
    posting_frequency: PostingFrequency = field(default_factory=PostingFrequency)

    def to_dict(self) -> dict:
        return {
            "totalVideos": self.total_videos,
            "totalViews": self.total_views,
            "totalLikes": self.total_likes,
            "totalComments": self.total_comments,
            "averageViews": self.average_views,
            "averageLikes": self.average_likes,
            "averageEngagementRate": self.average_engagement_rate,
            "medianEngagementRate": self.median_engagement_rate,
            "bestVideo": self.best_video.to_dict() if self.best_video else None,
            "postingFrequency": (self.posting_frequency or PostingFrequency()).to_dict(),
        }
