"""Suno API 인증 모듈.

Clerk 세션 수명 주기를 처리합니다: 로그인 쿠키로 세션 ID 획득,
세션 ID로 단기 bearer 토큰 교환, 긴 작업 중 토큰 갱신.
"""

from __future__ import annotations

import logging
import random

import httpx

from suno_api import utils
from suno_api.const import (
    CLERK_SESSION_URL,
    CLERK_TIMEOUT,
    CLERK_TOKEN_URL,
    KEEPALIVE_DELAY,
    USER_AGENTS,
)
from suno_api.exceptions import (
    AuthenticationError,
    IllegalStateError,
    TransportTimeoutError,
)

logger = logging.getLogger(__name__)


class SunoAuth:
    """인증 상태 및 토큰 수명 주기를 관리합니다.

    사용법:
        auth = SunoAuth(cookie)
        await auth.initialize()             # 세션 ID 획득 + 첫 토큰 발급
        await auth.refresh_token()          # 필요 시 토큰 갱신
        headers = auth.auth_headers()       # 요청 직전에 최신 토큰으로 헤더 생성
    """

    def __init__(
        self,
        cookie: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cookie = cookie
        self._user_agent = random.choice(USER_AGENTS)
        self._session_id: str = ""
        self._token: str = ""
        self._http = httpx.AsyncClient(
            headers={"User-Agent": self._user_agent, "Cookie": cookie},
            timeout=CLERK_TIMEOUT,
            transport=transport,
        )

    @property
    def cookie(self) -> str:
        return self._cookie

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def bearer_token(self) -> str:
        """현재 bearer 토큰. 갱신될 때마다 교체됩니다."""
        if not self._session_id:
            raise IllegalStateError("Session is not initialized. Call initialize() first.")
        return self._token

    async def close(self) -> None:
        await self._http.aclose()

    async def initialize(self) -> None:
        """세션 ID를 얻은 뒤 토큰을 한 번 갱신합니다."""
        await self._fetch_session_id()
        await self.refresh_token()

    async def _fetch_session_id(self) -> None:
        """Clerk 클라이언트 엔드포인트에서 마지막 활성 세션 ID를 가져옵니다."""
        data = await self._call("GET", CLERK_SESSION_URL)
        session = data.get("response") if isinstance(data, dict) else None
        sid = session.get("last_active_session_id") if isinstance(session, dict) else None
        if not sid:
            raise AuthenticationError("Failed to get session id. Check SUNO_COOKIE.")
        self._session_id = sid

    async def refresh_token(self, blocking_delay: bool = False) -> None:
        """세션 ID로 새 bearer 토큰을 발급받아 이후 모든 요청에 사용합니다.

        매개변수:
            blocking_delay: True이면 갱신 후 1~2초 대기합니다.
                            촘촘한 폴링 루프에서 갱신 빈도를 조절합니다.
        """
        if not self._session_id:
            raise IllegalStateError("Session ID is not set. Cannot renew token.")

        data = await self._call("POST", CLERK_TOKEN_URL.format(sid=self._session_id))
        token = data.get("jwt") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError("Token renewal response did not contain a jwt")
        self._token = token
        logger.info("KeepAlive...")

        if blocking_delay:
            await utils.random_sleep(*KEEPALIVE_DELAY)

    def auth_headers(self) -> dict[str, str]:
        """요청 직전에 호출되어 쿠키와 최신 토큰이 담긴 헤더를 반환합니다."""
        headers = {"User-Agent": self.user_agent, "Cookie": self.cookie}
        token = self.bearer_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _call(self, method: str, url: str) -> dict:
        try:
            resp = await self._http.request(method, url)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(f"Clerk request timed out: {url}") from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code in (401, 403):
                raise AuthenticationError(
                    "Session expired or revoked. Copy a fresh cookie into SUNO_COOKIE."
                ) from e
            raise AuthenticationError(f"Clerk request failed: {e}") from e
        except httpx.HTTPError as e:
            raise AuthenticationError(f"Clerk request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise AuthenticationError(f"Invalid Clerk response: {e}") from e
