import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from redis.exceptions import RedisError

from config.redis_config import get_redis

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_id"


def get_optional_user_id(request: Request) -> Optional[str]:
    """
    session_id 쿠키로 Redis 세션을 조회해 로그인 사용자 id를 돌려준다.
    쿠키가 없거나 세션이 만료되었으면 None(비로그인)으로 처리한다.
    """
    session_id = request.cookies.get(SESSION_COOKIE)
    if not session_id:
        return None
    try:
        user_id = get_redis().get(session_id)
    except RedisError as exc:
        # 로그인은 선택 사항이므로 세션 저장소 장애 시 비로그인 경로로 진행한다.
        logger.warning("[AUTH] session lookup failed, continuing as anonymous: %s", exc)
        return None
    return user_id or None


def require_user_id(user_id: Optional[str] = Depends(get_optional_user_id)) -> str:
    if user_id is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id
