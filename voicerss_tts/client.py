from __future__ import annotations

import logging
from typing import Iterator
from urllib.parse import quote_plus

import requests

from .config import settings
from .exceptions import ConnectionFailedError, ServiceError, TransportError
from .logging_utils import get_logger


logger = get_logger(__name__)

# 44 kHz, 16 bit, mono: the only quality the bridge asks for.
AUDIO_QUALITY = "44khz_16bit_mono"

# Upper bound on how much of a plain-text error body is read.
ERROR_BODY_LIMIT = 256


def encode_text(text: str) -> str:
    """Percent-encode ``text`` as UTF-8 for use as a query parameter.

    Strings that cannot be encoded (e.g. lone surrogates) are sent as-is.
    """
    try:
        return quote_plus(text, encoding="utf-8", errors="strict")
    except UnicodeEncodeError:
        logger.error("Could not UTF-8 encode text, sending it unencoded", exc_info=True)
        return text


def build_request_url(
    api_url: str,
    api_key: str,
    text: str,
    locale: str,
    audio_format: str,
) -> str:
    """Return the GET target for a synthesis call.

    Query parameters are emitted in the order the service documents:
    key, hl, c, f, src.
    """
    return (
        f"{api_url}?key={api_key}&hl={locale}&c={audio_format}"
        f"&f={AUDIO_QUALITY}&src={encode_text(text)}"
    )


def _redact(url: str, api_key: str) -> str:
    if not api_key:
        return url
    return url.replace(f"key={api_key}", "key=***", 1)


class AudioStream:
    """Readable audio body of a successful synthesis call.

    The caller owns the stream and must close it, preferably with ``with``.
    Iterating yields the body in chunks; ``read`` returns bytes like a file.
    """

    def __init__(self, response: requests.Response, chunk_size: int = 8192) -> None:
        self._response = response
        self._chunks = response.iter_content(chunk_size=chunk_size)
        self._buffer = bytearray()
        self.closed = False

    @property
    def content_type(self) -> str:
        return self._response.headers.get("Content-Type", "")

    def read(self, size: int = -1) -> bytes:
        if self.closed:
            raise ValueError("I/O operation on closed audio stream")
        if size < 0:
            self._buffer.extend(b"".join(self._chunks))
            size = len(self._buffer)
        else:
            while len(self._buffer) < size:
                chunk = next(self._chunks, b"")
                if not chunk:
                    break
                self._buffer.extend(chunk)
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def __iter__(self) -> Iterator[bytes]:
        if self.closed:
            raise ValueError("I/O operation on closed audio stream")
        return self._iter_chunks()

    def _iter_chunks(self) -> Iterator[bytes]:
        if self._buffer:
            data = bytes(self._buffer)
            self._buffer.clear()
            yield data
        for chunk in self._chunks:
            if chunk:
                yield chunk

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._response.close()

    def __enter__(self) -> "AudioStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class VoiceRSSClient:
    """Thin client for the VoiceRSS text-to-speech API.

    See http://www.voicerss.org/api for the request contract. Every call
    opens its own connection through ``requests.get``; nothing is pooled,
    cached or retried here.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout_seconds: float | None = None,
        chunk_size: int | None = None,
    ) -> None:
        self.api_url = api_url or settings.api_url
        self.timeout_seconds = timeout_seconds or settings.timeout_seconds
        self.chunk_size = chunk_size or settings.stream_chunk_size

    def synthesize(
        self,
        api_key: str,
        text: str,
        locale: str,
        audio_format: str,
    ) -> AudioStream:
        """Request speech audio for ``text`` and return the open body.

        Locale and format are passed through unchecked; the service decides
        what it accepts. Raises ``ConnectionFailedError`` when the service
        cannot be reached, ``TransportError`` on a non-200 status and
        ``ServiceError`` when the service answers with a text/plain message.
        """
        url = build_request_url(self.api_url, api_key, text, locale, audio_format)
        safe_url = _redact(url, api_key)
        logger.debug("Call %s", safe_url)

        try:
            response = requests.get(url, stream=True, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            logger.error("Call %s failed: %s", safe_url, exc)
            raise ConnectionFailedError(safe_url, exc) from exc

        # The service answers 200 even for errors, reporting them as a
        # text/plain body, but any other status is still a failure.
        if response.status_code != requests.codes.ok:
            logger.error("Call %s returned HTTP %d", safe_url, response.status_code)
            response.close()
            raise TransportError(response.status_code, safe_url)

        if logger.isEnabledFor(logging.DEBUG):
            for name, value in response.headers.items():
                logger.debug("Response.header: %s=%s", name, value)

        content_type = response.headers.get("Content-Type", "").lower()
        if "text/plain" in content_type:
            try:
                body = next(response.iter_content(chunk_size=ERROR_BODY_LIMIT), b"")
            except (requests.RequestException, OSError) as exc:
                logger.error("Could not read error body from %s: %s", safe_url, exc)
                raise ConnectionFailedError(safe_url, exc) from exc
            finally:
                try:
                    response.close()
                except Exception:
                    logger.debug("Failed to close response", exc_info=True)
            message = body.decode("utf-8", errors="replace").strip()
            logger.error("VoiceRSS returned an error for %s: %s", safe_url, message)
            raise ServiceError(message)

        return AudioStream(response, chunk_size=self.chunk_size)
