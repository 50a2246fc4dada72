from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SynthesizeRequest(BaseModel):
    """Request body for a one-shot synthesis call."""

    text: str = Field(..., min_length=1, description="Input text to synthesize")
    locale: Optional[str] = Field(
        None, description="VoiceRSS locale tag, e.g. 'en-us'"
    )
    voice: Optional[str] = Field(
        None, description="Voice name, must belong to the locale"
    )
    audio_format: Optional[str] = Field(
        None, description="Audio format code or codec name, e.g. 'MP3' or 'vorbis'"
    )


class Voice(BaseModel):
    name: str
    locale: str


class VoicesResponse(BaseModel):
    voices: List[Voice]


class LocalesResponse(BaseModel):
    locales: List[str]


class AudioFormatsResponse(BaseModel):
    formats: List[str]


class HealthResponse(BaseModel):
    status: Literal["ok"]


class ErrorResponse(BaseModel):
    detail: str
    upstream_status: Optional[int] = None
