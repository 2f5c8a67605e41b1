import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class EntitlementSettings:
    # 비로그인 요청과 무료 구독자 기본 노출 개수는 동일하게 20개
    anonymous_video_limit: int = int(os.getenv("ANONYMOUS_VIDEO_LIMIT", "20"))
    free_video_limit: int = int(os.getenv("FREE_VIDEO_LIMIT", "20"))
    paid_video_limit: int = int(os.getenv("PAID_VIDEO_LIMIT", "40"))


@dataclass
class FreshnessSettings:
    stale_after_hours: float = float(os.getenv("CREATOR_STALE_AFTER_HOURS", "48"))


@dataclass
class RequestSettings:
    creator_timeout_seconds: float = float(os.getenv("CREATOR_REQUEST_TIMEOUT_SECONDS", "10"))


@dataclass
class RedisSettings:
    host: str = os.getenv("REDIS_HOST", "localhost")
    port: int = int(os.getenv("REDIS_PORT", "6379"))
    password: str | None = os.getenv("REDIS_PASSWORD")
    db: int = int(os.getenv("REDIS_DB", "0"))
