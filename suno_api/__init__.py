"""Suno Python API 클라이언트.

사용법:
    from suno_api import create_client

    client = await create_client(cookie)
    audios = await client.custom_generate(lyrics, tags="lofi", title="Rain", wait_audio=True)
    credits = await client.get_credits()
    await client.close()
"""

from suno_api.client import SunoClient, create_client
from suno_api.exceptions import (
    AuthenticationError,
    IllegalStateError,
    RequestError,
    SunoError,
    TransportTimeoutError,
)
from suno_api.models import AudioInfo, Credits, GenerationRequest, parse_lyrics

__all__ = [
    "SunoClient",
    "create_client",
    "SunoError",
    "AuthenticationError",
    "IllegalStateError",
    "RequestError",
    "TransportTimeoutError",
    "AudioInfo",
    "Credits",
    "GenerationRequest",
    "parse_lyrics",
]
