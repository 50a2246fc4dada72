from .tts_service import VoiceRSSTTSService

__all__ = [
    "VoiceRSSTTSService",
]
