from __future__ import annotations

from typing import Optional

from voicerss_tts import catalog
from voicerss_tts import metrics as app_metrics
from voicerss_tts.client import AudioStream, VoiceRSSClient
from voicerss_tts.exceptions import ConnectionFailedError, ServiceError, TransportError
from voicerss_tts.logging_utils import get_logger
from voicerss_tts.models import AudioFormat


logger = get_logger(__name__)


class VoiceRSSTTSService:
    """Validates TTS requests and hands them to the VoiceRSS client.

    This is the entry point a host TTS framework uses: it owns the
    configured API key and checks text, locale, voice and format against
    the catalog before any network call is made.
    """

    def __init__(
        self,
        *,
        client: VoiceRSSClient,
        api_key: str,
        default_locale: str = "en-us",
        default_format: str = "MP3",
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._default_locale = default_locale
        self._default_format = default_format

    def list_voices(self, locale: Optional[str] = None) -> list[tuple[str, str]]:
        """Return (locale, voice) pairs sorted by locale, then voice name."""
        if locale is not None:
            locales = [catalog.normalize_locale(locale)]
        else:
            locales = sorted(catalog.available_locales())
        return [
            (loc, name)
            for loc in locales
            for name in sorted(catalog.available_voices(loc))
        ]

    def resolve_format(self, audio_format: Optional[str]) -> AudioFormat:
        value = audio_format or self._default_format
        if value.upper() in catalog.available_audio_formats():
            return AudioFormat(value.upper())
        return AudioFormat.from_codec(value)

    def resolve_locale(self, locale: Optional[str], voice: Optional[str]) -> str:
        lang = catalog.normalize_locale(locale or self._default_locale)
        if lang not in catalog.available_locales():
            raise ValueError(f"The passed locale is unsupported: {locale!r}")
        if voice is not None and voice not in catalog.available_voices(lang):
            raise ValueError(
                f"The passed voice is unsupported: {voice!r} for locale '{lang}'"
            )
        return lang

    def synthesize(
        self,
        text: str,
        *,
        locale: Optional[str] = None,
        voice: Optional[str] = None,
        audio_format: Optional[str] = None,
    ) -> tuple[AudioStream, AudioFormat]:
        """Synthesize ``text`` and return the open audio stream with its format.

        The voice only selects and validates the locale; VoiceRSS is asked
        for the locale's default speaker.
        """
        if not self._api_key:
            raise ValueError("Missing API key, configure it first before using")

        text = (text or "").strip()
        if not text:
            raise ValueError("The passed text is null or empty")

        lang = self.resolve_locale(locale, voice)
        fmt = self.resolve_format(audio_format)

        try:
            stream = self._client.synthesize(self._api_key, text, lang, fmt.value)
        except (TransportError, ConnectionFailedError):
            app_metrics.record_request(fmt.value, "transport_error")
            raise
        except ServiceError:
            app_metrics.record_request(fmt.value, "service_error")
            raise

        app_metrics.record_request(fmt.value, "success")
        logger.info(
            "Synthesized %d characters (locale=%s, format=%s)",
            len(text),
            lang,
            fmt.value,
        )
        return stream, fmt
