from __future__ import annotations

import asyncio
from pathlib import Path

from openai import OpenAI

from settings import settings


def _client() -> OpenAI:
    if not settings.OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY is not set; voice messages are disabled")
    return OpenAI(api_key=settings.OPENAI_API_KEY)


async def transcribe(path: str | Path, client: OpenAI | None = None) -> str:
    """Turn a voice recording into text the keyword matcher can scan."""
    client = client or _client()
    with open(path, "rb") as audio:
        result = await asyncio.to_thread(
            client.audio.transcriptions.create,
            model=settings.TRANSCRIBE_MODEL,
            file=audio,
        )
    return result.text.strip()
