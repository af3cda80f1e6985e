"""Suno API 예외 클래스."""


class SunoError(Exception):
    """모든 Suno 오류의 기본 예외."""


class AuthenticationError(SunoError):
    """세션 ID를 얻지 못했거나 토큰 갱신에 실패한 경우 발생."""


class IllegalStateError(SunoError):
    """세션이 초기화되기 전에 세션이 필요한 작업을 호출한 경우 발생."""


class TransportTimeoutError(SunoError):
    """요청별 타임아웃이 경과한 경우 발생."""


class RequestError(SunoError):
    """서비스 엔드포인트가 성공이 아닌 응답을 반환한 경우 발생."""

    def __init__(self, status_code: int | None, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        prefix = f"Request failed with status {status_code}" if status_code else "Request failed"
        super().__init__(f"{prefix}: {reason}" if reason else prefix)
