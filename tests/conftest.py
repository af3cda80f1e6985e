"""Shared fixtures: a fake Clerk identity provider and a fake curl session."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from suno_api import utils
from suno_api.auth import SunoAuth
from suno_api.client import SunoClient


def run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def make_clip(clip_id: str, status: str = "submitted", prompt: str = "") -> dict:
    return {
        "id": clip_id,
        "title": f"Song {clip_id}",
        "image_url": f"https://cdn1.suno.ai/image_{clip_id}.png",
        "audio_url": f"https://cdn1.suno.ai/{clip_id}.mp3" if status != "submitted" else "",
        "video_url": "",
        "created_at": "2024-04-01T12:00:00.000Z",
        "model_name": "chirp-v3",
        "status": status,
        "metadata": {
            "prompt": prompt,
            "gpt_description_prompt": "a calm piano piece",
            "type": "gen",
            "tags": "piano, calm",
            "duration_formatted": None,
        },
    }


class FakeClerk:
    """httpx handler standing in for the Clerk identity provider."""

    def __init__(self, session_id: str | None = "sess_123", token_status: int = 200):
        self.session_id = session_id
        self.token_status = token_status
        self.requests: list[httpx.Request] = []
        self.issued = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and request.url.path == "/v1/client":
            sid = self.session_id if request.headers.get("cookie") else None
            return httpx.Response(200, json={"response": {"last_active_session_id": sid}})
        if request.method == "POST" and request.url.path.endswith("/tokens/api"):
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"errors": []})
            self.issued += 1
            return httpx.Response(200, json={"jwt": f"jwt-{self.issued}"})
        return httpx.Response(404)

    @property
    def token_calls(self) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith("/tokens/api"))


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, reason: str = "OK"):  # noqa: ANN001
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self.content = b"" if payload is None else json.dumps(payload).encode()
        self.text = self.content.decode()

    def json(self):  # noqa: ANN201
        return self._payload


class FakeSession:
    """Stand-in for curl_cffi's AsyncSession.

    ``handler(method, url, kwargs)`` returns a FakeResponse or raises.
    """

    def __init__(self, handler):  # noqa: ANN001
        self.handler = handler
        self.calls: list[dict] = []
        self.closed = False

    async def request(self, method, url, **kwargs):  # noqa: ANN001, ANN003, ANN201
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.handler(method, url, kwargs)

    async def close(self) -> None:
        self.closed = True

    def calls_to(self, path: str) -> list[dict]:
        return [c for c in self.calls if path in c["url"]]


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[tuple[float, float]]:
    """Replace randomized sleeps with a recorder."""
    recorded: list[tuple[float, float]] = []

    async def fake_sleep(low, high):  # noqa: ANN001
        recorded.append((low, high))

    monkeypatch.setattr(utils, "random_sleep", fake_sleep)
    return recorded


@pytest.fixture
def clerk() -> FakeClerk:
    return FakeClerk()


@pytest.fixture
def make_auth(clerk: FakeClerk):
    def _make(cookie: str = "__client=abc") -> SunoAuth:
        return SunoAuth(cookie, transport=httpx.MockTransport(clerk))

    return _make


@pytest.fixture
def make_client(make_auth):
    def _make(handler, **kwargs) -> tuple[SunoClient, FakeSession]:  # noqa: ANN001
        session = FakeSession(handler)
        client = SunoClient(auth=make_auth(), session=session, **kwargs)
        return client, session

    return _make
