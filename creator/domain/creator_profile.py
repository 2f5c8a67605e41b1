import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from creator.domain.exceptions import InvalidInputError
from creator.domain.platform import Platform

_USERNAME_PATTERN = re.compile(r"^[a-z0-9._-]{1,100}$")


def normalize_username(username: str | None) -> str:
    """
    URL 경로로 들어온 핸들을 저장소 조회용 키로 정규화한다.
    - 앞뒤 공백과 선행 '@' 제거 후 casefold
    """
    candidate = (username or "").strip()
    if candidate.startswith("@"):
        candidate = candidate[1:]
    candidate = candidate.casefold()
    if not _USERNAME_PATTERN.match(candidate):
        raise InvalidInputError(f"invalid username: {username!r}")
    return candidate


@dataclass
class CreatorProfile:
    profile_id: str
    platform: Platform
    username: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    follower_count: Optional[int] = None
    last_scraped_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.profile_id,
            "platform": self.platform.value,
            "username": self.username,
            "display_name": self.display_name,
            "avatar_url": self.avatar_url,
            "follower_count": self.follower_count,
            "last_scraped_at": self.last_scraped_at,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
