from __future__ import annotations

from enum import Enum


class AudioFormat(str, Enum):
    """Audio formats the VoiceRSS API can return.

    Values are the codes sent as the ``c`` query parameter.
    """

    MP3 = "MP3"
    OGG = "OGG"
    AAC = "AAC"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        return self.value.lower()

    @classmethod
    def from_codec(cls, codec: str) -> "AudioFormat":
        """Map a host codec name (e.g. 'mp3', 'vorbis') to an API format."""
        try:
            return _CODECS[codec.strip().lower()]
        except KeyError:
            raise ValueError(f"Audio format not supported: {codec!r}")


_MIME_TYPES = {
    AudioFormat.MP3: "audio/mpeg",
    AudioFormat.OGG: "audio/ogg",
    AudioFormat.AAC: "audio/aac",
}

_CODECS = {
    "mp3": AudioFormat.MP3,
    "mpeg": AudioFormat.MP3,
    "ogg": AudioFormat.OGG,
    "vorbis": AudioFormat.OGG,
    "aac": AudioFormat.AAC,
}
