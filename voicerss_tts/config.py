from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration loaded from environment.

    The VoiceRSS key and endpoint live here so that the service, the HTTP
    gateway and the CLI all read the same values from .env.
    """

    api_key: str = os.getenv("VOICERSS_API_KEY", "")
    # Plain HTTP is what the service expects; point this at the https://
    # endpoint to trade latency for confidentiality of the key and text.
    api_url: str = os.getenv("VOICERSS_API_URL", "http://api.voicerss.org/")
    timeout_seconds: float = float(os.getenv("VOICERSS_TIMEOUT_SECONDS", "10"))

    default_locale: str = os.getenv("VOICERSS_DEFAULT_LOCALE", "en-us")
    default_format: str = os.getenv("VOICERSS_DEFAULT_FORMAT", "MP3")

    # Chunk size used when relaying the upstream audio body.
    stream_chunk_size: int = int(os.getenv("VOICERSS_STREAM_CHUNK_SIZE", "8192"))


settings = AppConfig()
