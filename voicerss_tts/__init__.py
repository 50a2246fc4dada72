from .catalog import available_audio_formats, available_locales, available_voices
from .client import AudioStream, VoiceRSSClient, build_request_url
from .exceptions import (
    ConnectionFailedError,
    ServiceError,
    TransportError,
    VoiceRSSError,
)

__all__ = [
    "available_audio_formats",
    "available_locales",
    "available_voices",
    "AudioStream",
    "VoiceRSSClient",
    "build_request_url",
    "ConnectionFailedError",
    "ServiceError",
    "TransportError",
    "VoiceRSSError",
]
