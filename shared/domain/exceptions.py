"""여러 컨텍스트(creator, subscription)가 함께 쓰는 예외.

호출 측(라우터)은 메시지 문자열이 아니라 예외 타입 또는 ``kind`` 값으로 분기한다.
"""


class CreatorInsightError(Exception):
    """서비스 최상위 예외."""

    kind = "error"


class UpstreamUnavailableError(CreatorInsightError):
    """프로필/영상/구독 저장소에 접근할 수 없거나 오류를 반환한 경우."""

    kind = "upstream_unavailable"

    def __init__(self, store: str, message: str = "store unavailable"):
        self.store = store
        super().__init__(f"[{store}] {message}")
