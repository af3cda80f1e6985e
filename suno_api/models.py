"""Suno API 데이터 모델."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from suno_api.const import DEFAULT_MODEL, TERMINAL_STATUSES


def parse_lyrics(prompt: str) -> str:
    """가사 텍스트에서 빈 줄을 제거하고 줄바꿈 하나로 다시 연결합니다."""
    lines = [line for line in prompt.split("\n") if line.strip()]
    return "\n".join(lines)


@dataclass
class AudioInfo:
    """Suno 오디오 생성 작업(클립) 하나를 나타냅니다."""

    id: str
    status: str = "submitted"
    title: str | None = None
    image_url: str | None = None
    lyric: str = ""
    audio_url: str | None = None
    video_url: str | None = None
    created_at: str = ""
    model_name: str = ""
    gpt_description_prompt: str | None = None
    prompt: str | None = None
    type: str | None = None
    tags: str | None = None
    duration: str | None = None

    @property
    def is_terminal(self) -> bool:
        """폴링을 멈춰도 되는 상태(complete, streaming)이면 True."""
        return self.status in TERMINAL_STATUSES

    @classmethod
    def from_clip(cls, clip: dict[str, Any]) -> AudioInfo:
        """서비스의 원시 클립 레코드를 AudioInfo로 변환합니다."""
        metadata = clip.get("metadata") or {}
        prompt = metadata.get("prompt")
        return cls(
            id=clip["id"],
            status=clip.get("status", ""),
            title=clip.get("title"),
            image_url=clip.get("image_url"),
            lyric=parse_lyrics(prompt) if prompt else "",
            audio_url=clip.get("audio_url"),
            video_url=clip.get("video_url"),
            created_at=clip.get("created_at", ""),
            model_name=clip.get("model_name", ""),
            gpt_description_prompt=metadata.get("gpt_description_prompt"),
            prompt=prompt,
            type=metadata.get("type"),
            tags=metadata.get("tags"),
            duration=metadata.get("duration_formatted"),
        )


@dataclass
class GenerationRequest:
    """노래 생성 요청 하나를 나타냅니다 (저장되지 않음).

    커스텀 모드에서는 prompt/tags/title이 개별 필드로 전송되고,
    일반 모드에서는 prompt가 gpt_description_prompt 하나로만 전송됩니다.
    """

    prompt: str
    is_custom: bool = False
    tags: str | None = None
    title: str | None = None
    make_instrumental: bool = False
    wait_audio: bool = False

    def to_payload(self) -> dict[str, Any]:
        """/api/generate/v2/ 요청 본문을 빌드합니다."""
        payload: dict[str, Any] = {
            "make_instrumental": self.make_instrumental is True,
            "mv": DEFAULT_MODEL,
            "prompt": "",
        }
        if self.is_custom:
            payload["tags"] = self.tags
            payload["title"] = self.title
            payload["prompt"] = self.prompt
        else:
            payload["gpt_description_prompt"] = self.prompt
        return payload


@dataclass
class Credits:
    """Suno 계정의 크레딧 잔액 및 월간 사용량."""

    credits_left: int = 0
    period: str | None = None
    monthly_limit: int = 0
    monthly_usage: int = 0
