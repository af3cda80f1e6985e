"""Suno 고수준 클라이언트."""

from __future__ import annotations

import logging
import os
import time
from typing import Any

from dotenv import load_dotenv

from suno_api import utils
from suno_api.api import SunoAPI
from suno_api.auth import SunoAuth
from suno_api.const import (
    COOKIE_ENV_VAR,
    POLL_INITIAL_DELAY,
    POLL_INTERVAL,
    POLL_TIMEOUT,
)
from suno_api.models import AudioInfo, Credits, GenerationRequest

logger = logging.getLogger(__name__)


class SunoClient:
    """Suno로 노래를 생성하는 고수준 클라이언트.

    Usage:
        client = await create_client(cookie)
        audios = await client.generate("a calm piano piece", wait_audio=True)
        credits = await client.get_credits()
    """

    def __init__(
        self,
        cookie: str = "",
        print_log: bool = False,
        poll_timeout: float = POLL_TIMEOUT,
        auth: SunoAuth | None = None,
        session: Any | None = None,
    ):
        self._auth = auth or SunoAuth(cookie)
        self._api = SunoAPI(self._auth, session=session)
        self._print_log = print_log
        self._poll_timeout = poll_timeout

    def _log(self, msg: str) -> None:
        if self._print_log:
            print(msg)

    async def init(self) -> SunoClient:
        """세션을 초기화합니다. 다른 작업보다 먼저 성공해야 합니다."""
        await self._auth.initialize()
        return self

    async def keep_alive(self, blocking_delay: bool = False) -> None:
        """bearer 토큰을 갱신합니다."""
        await self._auth.refresh_token(blocking_delay)

    async def close(self) -> None:
        await self._api.close()
        await self._auth.close()

    async def __aenter__(self) -> SunoClient:
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def generate(
        self,
        prompt: str,
        make_instrumental: bool = False,
        wait_audio: bool = False,
    ) -> list[AudioInfo]:
        """자유 형식 설명으로 노래를 생성합니다.

        매개변수:
            prompt: 원하는 노래에 대한 설명.
            make_instrumental: True이면 반주만 생성합니다.
            wait_audio: True이면 오디오가 준비될 때까지 폴링합니다.
        """
        start = time.monotonic()
        audios = await self.submit(GenerationRequest(
            prompt=prompt,
            make_instrumental=make_instrumental,
            wait_audio=wait_audio,
        ))
        logger.info("Generate cost time: %.2fs", time.monotonic() - start)
        return audios

    async def custom_generate(
        self,
        prompt: str,
        tags: str,
        title: str,
        make_instrumental: bool = False,
        wait_audio: bool = False,
    ) -> list[AudioInfo]:
        """가사, 태그, 제목을 직접 지정해 노래를 생성합니다.

        매개변수:
            prompt: 가사 텍스트.
            tags: 장르/스타일 태그.
            title: 노래 제목.
            make_instrumental: True이면 반주만 생성합니다.
            wait_audio: True이면 오디오가 준비될 때까지 폴링합니다.
        """
        start = time.monotonic()
        audios = await self.submit(GenerationRequest(
            prompt=prompt,
            is_custom=True,
            tags=tags,
            title=title,
            make_instrumental=make_instrumental,
            wait_audio=wait_audio,
        ))
        logger.info("Custom generate cost time: %.2fs", time.monotonic() - start)
        return audios

    async def submit(self, request: GenerationRequest) -> list[AudioInfo]:
        """생성 요청을 제출하고, wait_audio이면 완료까지 폴링합니다.

        반환값:
            AudioInfo 목록. 폴링이 타임아웃되면 마지막으로 조회한 (미완료일 수 있는)
            목록을 반환하므로 호출자가 status를 직접 확인해야 합니다.

        예외:
            RequestError: 서비스가 성공이 아닌 응답을 반환한 경우.
            TransportTimeoutError: 요청별 타임아웃이 경과한 경우.
        """
        payload = request.to_payload()
        logger.info("generateSongs payload: %s", payload)

        clips = await self._api.generate_songs(payload)
        song_ids = [clip["id"] for clip in clips]
        self._log(f"Songs submitted: {', '.join(song_ids)}")

        if not request.wait_audio:
            await self._auth.refresh_token(blocking_delay=True)
            return [AudioInfo.from_clip(clip) for clip in clips]

        return await self._poll_songs(song_ids)

    async def _poll_songs(self, song_ids: list[str]) -> list[AudioInfo]:
        """모든 곡이 complete/streaming이 되거나 마감 시간이 지날 때까지 피드를 폴링합니다."""
        start = time.monotonic()
        last: list[AudioInfo] = []
        self._log("  Waiting for audio...")

        # 서비스가 초기 레코드를 만들 시간
        await utils.random_sleep(*POLL_INITIAL_DELAY)

        while time.monotonic() - start < self._poll_timeout:
            audios = await self._api.get_feed(song_ids)
            if all(audio.is_terminal for audio in audios):
                self._log("  Completed!")
                return audios

            last = audios
            await utils.random_sleep(*POLL_INTERVAL)
            await self._auth.refresh_token(blocking_delay=True)

        logger.info("Polling timed out after %ss; returning last known state", self._poll_timeout)
        return last

    async def get(self, song_ids: list[str] | None = None) -> list[AudioInfo]:
        """곡 정보를 조회합니다. song_ids가 없으면 전체 피드를 조회합니다."""
        return await self._api.get_feed(song_ids)

    async def get_credits(self) -> Credits:
        """남은 크레딧과 월간 사용량을 가져옵니다."""
        return await self._api.get_billing()


async def create_client(
    cookie: str | None = None,
    env_path: str = ".env",
    print_log: bool = False,
) -> SunoClient:
    """쿠키로 클라이언트를 만들고 세션을 초기화해 반환합니다.

    cookie가 없으면 .env / 환경 변수의 SUNO_COOKIE를 사용합니다.
    쿠키가 비어 있으면 세션 ID 단계에서 AuthenticationError가 발생합니다.
    """
    load_dotenv(env_path)
    cookie = cookie or os.getenv(COOKIE_ENV_VAR, "")
    client = SunoClient(cookie, print_log=print_log)
    try:
        return await client.init()
    except Exception:
        await client.close()
        raise
