import math
import statistics
from typing import Iterable

from creator.application.port.creator_repository_port import CreatorRepositoryPort
from creator.application.usecase.video_selector import ranking_key
from creator.domain.aggregate_stats import AggregateStats, PostingFrequency
from creator.domain.video import Video

SECONDS_PER_DAY = 60 * 60 * 24


def posting_frequency(videos: Iterable[Video]) -> PostingFrequency:
    """
    게시 주기 계산.
    - 게시일이 있는 영상만 대상으로, 가장 이른 게시일~가장 최근 게시일 구간을 기준으로 한다(현재 시각 기준 아님).
    - 영상이 1개 이하이거나 구간 길이가 0이면 비율을 정할 수 없으므로 0/0.
    """
    timestamps = [v.posted_at.timestamp() for v in videos if v.posted_at is not None]
    if len(timestamps) < 2:
        return PostingFrequency()
    span_days = (max(timestamps) - min(timestamps)) / SECONDS_PER_DAY
    if span_days <= 0:
        return PostingFrequency()
    per_day = len(timestamps) / span_days
    return PostingFrequency(per_week=round(per_day * 7, 1), per_month=round(per_day * 30, 1))


def summarize(videos: Iterable[Video]) -> AggregateStats:
    """
    전체 영상 이력을 하나의 AggregateStats로 축약한다.
    입력 순서와 무관하게 같은 결과가 나오도록 fsum/정렬 기반으로만 계산한다.
    """
    videos = list(videos)
    if not videos:
        return AggregateStats()

    total = len(videos)
    total_views = sum(v.view_count for v in videos)
    total_likes = sum(v.like_count for v in videos)
    total_comments = sum(v.comment_count for v in videos)
    rates = sorted(v.engagement_rate for v in videos)

    return AggregateStats(
        total_videos=total,
        total_views=total_views,
        total_likes=total_likes,
        total_comments=total_comments,
        average_views=round(total_views / total),
        average_likes=round(total_likes / total),
        average_engagement_rate=round(math.fsum(rates) / total, 4),
        median_engagement_rate=round(statistics.median(rates), 4),
        best_video=min(videos, key=ranking_key("engagement_rate", "desc")),
        posting_frequency=posting_frequency(videos),
    )


class StatsAggregator:
    def __init__(self, repository: CreatorRepositoryPort):
        # 노출 limit과 독립적으로 전체 영상 이력을 다시 읽어 집계한다.
        self.repository = repository

    def compute_stats(self, profile_id: str) -> AggregateStats:
        return summarize(self.repository.list_all_videos(profile_id))
