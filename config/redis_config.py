import redis

from config.settings import RedisSettings

_redis_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """
    세션 조회용 Redis 클라이언트를 지연 생성합니다. 연결은 첫 명령 실행 시점에 맺어집니다.
    """
    global _redis_client
    if _redis_client is not None:
        return _redis_client
    settings = RedisSettings()
    _redis_client = redis.Redis(
        host=settings.host,
        port=settings.port,
        password=settings.password,
        db=settings.db,
        decode_responses=True,
    )
    return _redis_client
