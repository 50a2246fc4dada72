from __future__ import annotations

from functools import lru_cache

from voicerss_tts.client import VoiceRSSClient
from voicerss_tts.config import settings
from voicerss_tts.services import VoiceRSSTTSService


@lru_cache(maxsize=1)
def get_client() -> VoiceRSSClient:
    return VoiceRSSClient(
        api_url=settings.api_url,
        timeout_seconds=settings.timeout_seconds,
        chunk_size=settings.stream_chunk_size,
    )


@lru_cache(maxsize=1)
def get_tts_service() -> VoiceRSSTTSService:
    """Return the process-wide TTS service.

    The API key, default locale and default format come from AppConfig so
    they can be set through environment variables.
    """
    return VoiceRSSTTSService(
        client=get_client(),
        api_key=settings.api_key,
        default_locale=settings.default_locale,
        default_format=settings.default_format,
    )
