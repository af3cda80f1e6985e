"""Basic usage examples for the Suno API client."""

import asyncio

from suno_api import create_client


# --- Example 1: Description prompt, return right after submission ---
async def quick_generation():
    client = await create_client()  # reads SUNO_COOKIE from .env
    async with client:
        audios = await client.generate("a calm piano piece")
        for audio in audios:
            print(f"{audio.id}  {audio.status}")


# --- Example 2: Custom lyrics, wait until the audio is ready ---
async def custom_generation():
    client = await create_client()
    async with client:
        audios = await client.custom_generate(
            "[Verse]\nRain on the window\nSoft keys falling",
            tags="lofi, piano",
            title="Rainy Window",
            wait_audio=True,
        )
        for audio in audios:
            # 폴링이 타임아웃되면 미완료 상태가 올 수 있음
            print(f"{audio.title}: {audio.status} {audio.audio_url or ''}")


# --- Example 3: Check credits and re-fetch earlier songs ---
async def credits_and_feed(song_ids: list[str]):
    client = await create_client()
    async with client:
        credits = await client.get_credits()
        print(f"Credits left: {credits.credits_left} ({credits.monthly_usage}/{credits.monthly_limit})")
        for audio in await client.get(song_ids):
            print(f"{audio.id}  {audio.status}")


if __name__ == "__main__":
    asyncio.run(quick_generation())
