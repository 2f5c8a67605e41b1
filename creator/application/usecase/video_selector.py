from creator.application.port.creator_repository_port import CreatorRepositoryPort
from creator.domain.exceptions import InvalidInputError
from creator.domain.video import ORDERABLE_FIELDS, Video

ORDER_DIRECTIONS = ("asc", "desc")


def ranking_key(order_by: str, order_direction: str):
    """
    정렬 키를 만든다.
    - 1순위: 요청 필드(요청 방향)
    - 동률: 게시일 최신순(게시일 없는 영상은 뒤로), 그다음 video_id 오름차순
    """
    sign = -1 if order_direction == "desc" else 1

    def key(video: Video):
        posted = video.sort_value("posted_at")
        return (sign * video.sort_value(order_by), -posted, video.video_id)

    return key


class VideoSelector:
    def __init__(self, repository: CreatorRepositoryPort):
        # 크리에이터 영상 목록을 노출 개수 제한(entitlement)에 맞춰 정렬/절단한다.
        self.repository = repository

    def select_videos(
        self,
        profile_id: str,
        limit: int,
        order_by: str = "engagement_rate",
        order_direction: str = "desc",
    ) -> list[Video]:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidInputError(f"limit must be a positive integer: {limit!r}")
        if order_by not in ORDERABLE_FIELDS:
            raise InvalidInputError(f"unsupported order_by: {order_by!r}")
        if order_direction not in ORDER_DIRECTIONS:
            raise InvalidInputError(f"unsupported order_direction: {order_direction!r}")

        videos = self.repository.get_videos(
            profile_id, limit=limit, order_by=order_by, order_direction=order_direction
        )
        # 저장소 반환 순서에 의존하지 않도록 동일한 키로 다시 정렬한다.
        ranked = sorted(videos, key=ranking_key(order_by, order_direction))
        return ranked[:limit]
