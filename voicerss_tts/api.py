from __future__ import annotations

from typing import Iterator, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.background import BackgroundTask

from voicerss_tts import catalog
from voicerss_tts import metrics as app_metrics
from voicerss_tts.client import AudioStream
from voicerss_tts.container import get_tts_service
from voicerss_tts.exceptions import ConnectionFailedError, ServiceError, TransportError
from voicerss_tts.logging_utils import get_logger
from voicerss_tts.models import (
    AudioFormatsResponse,
    ErrorResponse,
    HealthResponse,
    LocalesResponse,
    SynthesizeRequest,
    Voice,
    VoicesResponse,
)


logger = get_logger(__name__)
router = APIRouter()


@router.get("/healthz", response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/v1/formats", response_model=AudioFormatsResponse)
async def list_formats() -> AudioFormatsResponse:
    return AudioFormatsResponse(formats=sorted(catalog.available_audio_formats()))


@router.get("/v1/locales", response_model=LocalesResponse)
async def list_locales() -> LocalesResponse:
    return LocalesResponse(locales=sorted(catalog.available_locales()))


@router.get("/v1/voices", response_model=VoicesResponse)
async def list_voices(locale: Optional[str] = Query(None)) -> VoicesResponse:
    pairs = get_tts_service().list_voices(locale)
    return VoicesResponse(voices=[Voice(name=name, locale=loc) for loc, name in pairs])


def _relay(stream: AudioStream, audio_format: str) -> Iterator[bytes]:
    try:
        for chunk in stream:
            app_metrics.record_stream_bytes(audio_format, len(chunk))
            yield chunk
    finally:
        stream.close()


@router.post(
    "/v1/tts",
    response_class=StreamingResponse,
    responses={502: {"model": ErrorResponse}},
)
def synthesize(req: SynthesizeRequest):
    """Stream synthesized audio straight from VoiceRSS to the client.

    Declared sync so the blocking upstream call runs in the threadpool.
    """
    try:
        stream, fmt = get_tts_service().synthesize(
            req.text,
            locale=req.locale,
            voice=req.voice,
            audio_format=req.audio_format,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TransportError as exc:
        err = ErrorResponse(detail=str(exc), upstream_status=exc.status_code)
        return JSONResponse(err.model_dump(), status_code=502)
    except ServiceError as exc:
        err = ErrorResponse(detail=exc.message)
        return JSONResponse(err.model_dump(), status_code=502)
    except ConnectionFailedError as exc:
        err = ErrorResponse(detail=str(exc))
        return JSONResponse(err.model_dump(), status_code=502)

    return StreamingResponse(
        _relay(stream, fmt.value),
        media_type=fmt.mime_type,
        headers={"Content-Disposition": f'inline; filename="speech.{fmt.extension}"'},
        background=BackgroundTask(stream.close),
    )


@router.get("/metrics")
async def metrics() -> PlainTextResponse:
    payload = generate_latest()
    return PlainTextResponse(payload, media_type=CONTENT_TYPE_LATEST)
