from __future__ import annotations

import pytest

from conftest import make_clip
from suno_api.models import AudioInfo, GenerationRequest, parse_lyrics


def test_parse_lyrics_drops_blank_lines():
    raw = "[Verse]\n\nRain on the window\n   \nSoft keys falling\n\n"
    assert parse_lyrics(raw) == "[Verse]\nRain on the window\nSoft keys falling"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n\n\n",
        "one line",
        "a\n\nb\n \nc",
        "  leading spaces kept\n\n\ttab line\n",
        "[Chorus]\r\nla la\r\n\r\n",
    ],
)
def test_parse_lyrics_is_idempotent(text):
    once = parse_lyrics(text)
    assert parse_lyrics(once) == once


def test_from_clip_maps_metadata_fields():
    clip = make_clip("a1", status="streaming", prompt="line one\n\nline two")
    clip["metadata"]["duration_formatted"] = "2:14"

    audio = AudioInfo.from_clip(clip)

    assert audio.id == "a1"
    assert audio.status == "streaming"
    assert audio.title == "Song a1"
    assert audio.lyric == "line one\nline two"
    assert audio.prompt == "line one\n\nline two"
    assert audio.gpt_description_prompt == "a calm piano piece"
    assert audio.tags == "piano, calm"
    assert audio.type == "gen"
    assert audio.duration == "2:14"
    assert audio.model_name == "chirp-v3"


def test_from_clip_without_prompt_has_empty_lyric():
    clip = make_clip("a2")
    clip["metadata"]["prompt"] = None
    assert AudioInfo.from_clip(clip).lyric == ""


@pytest.mark.parametrize(
    ("status", "terminal"),
    [("complete", True), ("streaming", True), ("submitted", False), ("queued", False), ("error", False)],
)
def test_terminal_statuses(status, terminal):
    assert AudioInfo(id="x", status=status).is_terminal is terminal


def test_description_payload():
    payload = GenerationRequest(prompt="a calm piano piece").to_payload()
    assert payload == {
        "gpt_description_prompt": "a calm piano piece",
        "make_instrumental": False,
        "mv": "chirp-v3-0",
        "prompt": "",
    }


def test_description_payload_ignores_tags_and_title():
    payload = GenerationRequest(
        prompt="synthwave night drive", tags="synthwave", title="Night", make_instrumental=True,
    ).to_payload()
    assert "tags" not in payload
    assert "title" not in payload
    assert payload["make_instrumental"] is True


def test_custom_payload_sends_structured_fields():
    payload = GenerationRequest(
        prompt="[Verse]\nHello", is_custom=True, tags="pop", title="Hello",
    ).to_payload()
    assert payload == {
        "make_instrumental": False,
        "mv": "chirp-v3-0",
        "prompt": "[Verse]\nHello",
        "tags": "pop",
        "title": "Hello",
    }
    assert "gpt_description_prompt" not in payload


@pytest.mark.parametrize("flag", ["false", "true", 1, None])
def test_instrumental_flag_must_be_a_real_bool(flag):
    payload = GenerationRequest(prompt="x", make_instrumental=flag).to_payload()
    assert payload["make_instrumental"] is False
