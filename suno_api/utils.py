"""Suno API 클라이언트 보조 함수."""

from __future__ import annotations

import asyncio
import random


async def random_sleep(low: float, high: float) -> None:
    """low~high초 사이의 임의 시간만큼 대기합니다 (low == high이면 고정 대기)."""
    await asyncio.sleep(random.uniform(low, high))
