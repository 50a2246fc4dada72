from __future__ import annotations

from prometheus_client import Counter


VOICERSS_REQUESTS_TOTAL = Counter(
    "voicerss_requests_total",
    "Total VoiceRSS synthesis calls by audio format and outcome.",
    ["format", "outcome"],
)

VOICERSS_STREAM_BYTES_TOTAL = Counter(
    "voicerss_stream_bytes_total",
    "Total number of audio bytes relayed from VoiceRSS.",
    ["format"],
)


def record_request(audio_format: str, outcome: str) -> None:
    """Record one synthesis call.

    `outcome` is one of "success", "transport_error" or "service_error".
    """
    VOICERSS_REQUESTS_TOTAL.labels(format=audio_format, outcome=outcome).inc()


def record_stream_bytes(audio_format: str, num_bytes: int) -> None:
    VOICERSS_STREAM_BYTES_TOTAL.labels(format=audio_format).inc(num_bytes)
