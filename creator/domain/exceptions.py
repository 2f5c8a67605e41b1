"""크리에이터 집계 도메인 예외 정의."""

from shared.domain.exceptions import CreatorInsightError, UpstreamUnavailableError

__all__ = [
    "CreatorInsightError",
    "CreatorNotFoundError",
    "InvalidInputError",
    "UpstreamUnavailableError",
]


class InvalidInputError(CreatorInsightError):
    """플랫폼/사용자명/limit 등 입력값이 잘못된 경우. 저장소 접근 전에 거부한다."""

    kind = "input_invalid"


class CreatorNotFoundError(CreatorInsightError):
    """(platform, username)에 해당하는 프로필이 없을 때."""

    kind = "not_found"

    def __init__(self, platform: str, username: str):
        self.platform = platform
        self.username = username
        super().__init__(f"creator not found: {platform}/{username}")
