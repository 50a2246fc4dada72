from .api import (
    SynthesizeRequest,
    Voice,
    VoicesResponse,
    LocalesResponse,
    AudioFormatsResponse,
    HealthResponse,
    ErrorResponse,
)
from .audio_format import AudioFormat

__all__ = [
    "AudioFormat",
    "SynthesizeRequest",
    "Voice",
    "VoicesResponse",
    "LocalesResponse",
    "AudioFormatsResponse",
    "HealthResponse",
    "ErrorResponse",
]
