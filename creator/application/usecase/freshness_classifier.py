from datetime import datetime, timedelta, timezone

from creator.domain.freshness import Freshness

DEFAULT_STALE_AFTER = timedelta(hours=48)


class FreshnessClassifier:
    def __init__(self, stale_after: timedelta = DEFAULT_STALE_AFTER):
        self.stale_after = stale_after

    def classify(self, last_scraped_at: datetime | None, now: datetime) -> Freshness:
        """
        마지막 수집 시각 기준 캐시 신선도를 판정한다. 경과 시간이 stale_after를 "초과"할 때만 stale.
        """
        if last_scraped_at is None:
            return Freshness.NEVER_SCRAPED
        if self._to_utc(now) - self._to_utc(last_scraped_at) > self.stale_after:
            return Freshness.STALE
        return Freshness.FRESH

    @staticmethod
    def _to_utc(dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
