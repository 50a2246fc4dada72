from __future__ import annotations

import time
from functools import lru_cache

from fastapi import FastAPI, Request

from voicerss_tts.api import router as api_router
from voicerss_tts.config import settings
from voicerss_tts.container import get_tts_service
from voicerss_tts.logging_utils import get_logger


logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="voicerss-tts", version="0.1.0")

    @app.middleware("http")
    async def log_http_requests(request: Request, call_next):
        """Centralized logging for all HTTP requests."""
        start = time.monotonic()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration = time.monotonic() - start
            client_host = request.client.host if request.client else "unknown"
            status_code = response.status_code if response is not None else 500
            logger.info(
                "HTTP %s %s from %s -> %d in %.3fs",
                request.method,
                request.url.path,
                client_host,
                status_code,
                duration,
            )

    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        # Force-init the service so configuration problems surface early.
        get_tts_service()
        if not settings.api_key:
            logger.warning("VOICERSS_API_KEY is not set; synthesis requests will fail")
        logger.info("VoiceRSS endpoint: %s", settings.api_url)

    return app


@lru_cache(maxsize=1)
def get_app() -> FastAPI:
    return create_app()


app = get_app()
