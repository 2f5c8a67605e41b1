from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from creator.domain.aggregate_stats import AggregateStats
from creator.domain.creator_profile import CreatorProfile
from creator.domain.freshness import Freshness
from creator.domain.video import Video


@dataclass
class CreatorAggregate:
    profile: CreatorProfile
    videos: list[Video]
    stats: AggregateStats
    freshness: Freshness
    video_limit: int

    @property
    def cache_timestamp(self) -> Optional[datetime]:
        return self.profile.last_scraped_at

    def to_dict(self) -> dict:
        return {
            "profile": self.profile.to_dict(),
            "videos": [v.to_dict() for v in self.videos],
            "stats": self.stats.to_dict(),
            "freshness": self.freshness.value,
            "cacheTimestamp": self.cache_timestamp,
            "videoLimit": self.video_limit,
        }
