from __future__ import annotations

from typing import Any

import pytest

from voicerss_tts.exceptions import ConnectionFailedError, ServiceError, TransportError
from voicerss_tts.metrics import VOICERSS_REQUESTS_TOTAL
from voicerss_tts.models import AudioFormat
from voicerss_tts.services import VoiceRSSTTSService


class RecordingClient:
    """Stand-in for VoiceRSSClient that records calls."""

    def __init__(self, result: Any = "stream", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, str, str]] = []

    def synthesize(self, api_key: str, text: str, locale: str, audio_format: str):
        self.calls.append((api_key, text, locale, audio_format))
        if self.error is not None:
            raise self.error
        return self.result


def _requests_metric_value(audio_format: str, outcome: str) -> float:
    for metric in VOICERSS_REQUESTS_TOTAL.collect():
        for sample in metric.samples:
            if (
                sample.name == "voicerss_requests_total"
                and sample.labels.get("format") == audio_format
                and sample.labels.get("outcome") == outcome
            ):
                return float(sample.value)
    return 0.0


def _service(client: RecordingClient, api_key: str = "K") -> VoiceRSSTTSService:
    return VoiceRSSTTSService(client=client, api_key=api_key)  # type: ignore[arg-type]


def test_synthesize_normalizes_and_delegates() -> None:
    client = RecordingClient()
    service = _service(client)

    stream, fmt = service.synthesize(
        "  Hallo Welt ", locale="de-DE", voice="Jonas", audio_format="vorbis"
    )

    assert stream == "stream"
    assert fmt is AudioFormat.OGG
    assert client.calls == [("K", "Hallo Welt", "de-de", "OGG")]


def test_synthesize_uses_defaults() -> None:
    client = RecordingClient()
    service = VoiceRSSTTSService(
        client=client,  # type: ignore[arg-type]
        api_key="K",
        default_locale="fr-fr",
        default_format="AAC",
    )

    _, fmt = service.synthesize("Bonjour")

    assert fmt is AudioFormat.AAC
    assert client.calls[0][2:] == ("fr-fr", "AAC")


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"text": "   "}, "null or empty"),
        ({"text": "hi", "locale": "xx-yy"}, "locale is unsupported"),
        ({"text": "hi", "locale": "en-us", "voice": "Jonas"}, "voice is unsupported"),
        ({"text": "hi", "audio_format": "flac"}, "Audio format not supported"),
    ],
)
def test_synthesize_rejects_invalid_requests(kwargs: dict, message: str) -> None:
    client = RecordingClient()
    service = _service(client)
    text = kwargs.pop("text")

    with pytest.raises(ValueError) as exc_info:
        service.synthesize(text, **kwargs)

    assert message in str(exc_info.value)
    assert client.calls == []


def test_synthesize_requires_api_key() -> None:
    service = _service(RecordingClient(), api_key="")

    with pytest.raises(ValueError) as exc_info:
        service.synthesize("hello")

    assert "Missing API key" in str(exc_info.value)


def test_synthesize_records_success_metric() -> None:
    before = _requests_metric_value("MP3", "success")

    _service(RecordingClient()).synthesize("hello", audio_format="mp3")

    assert _requests_metric_value("MP3", "success") == before + 1.0


@pytest.mark.parametrize(
    "error, outcome",
    [
        (TransportError(500, "http://api.voicerss.org/?key=***"), "transport_error"),
        (
            ConnectionFailedError("http://api.voicerss.org/?key=***", OSError("refused")),
            "transport_error",
        ),
        (ServiceError("ERROR: Invalid key"), "service_error"),
    ],
)
def test_synthesize_propagates_errors_and_records_metric(error, outcome) -> None:
    before = _requests_metric_value("MP3", outcome)
    service = _service(RecordingClient(error=error))

    with pytest.raises(type(error)):
        service.synthesize("hello")

    assert _requests_metric_value("MP3", outcome) == before + 1.0


def test_list_voices_is_sorted_and_filterable() -> None:
    service = _service(RecordingClient())

    assert service.list_voices("pl-PL") == [("pl-pl", "Jan"), ("pl-pl", "Julia")]
    assert service.list_voices("xx-yy") == []

    everything = service.list_voices()
    assert everything == sorted(everything)
    assert ("zh-tw", "Lee") in everything


def test_audio_format_from_codec() -> None:
    assert AudioFormat.from_codec("MP3") is AudioFormat.MP3
    assert AudioFormat.from_codec("Vorbis") is AudioFormat.OGG
    assert AudioFormat.AAC.mime_type == "audio/aac"
    assert AudioFormat.OGG.extension == "ogg"
    with pytest.raises(ValueError):
        AudioFormat.from_codec("wav")
