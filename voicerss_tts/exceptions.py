from __future__ import annotations


class VoiceRSSError(Exception):
    """Base class for failures reported while talking to VoiceRSS."""


class TransportError(VoiceRSSError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Could not read from service: HTTP code {status_code}")


class ServiceError(VoiceRSSError):
    """The service answered 200 but the body is a plain-text error message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(
            f"Could not read audio content, service returned an error: {message}"
        )


class ConnectionFailedError(VoiceRSSError):
    """The service could not be reached or the response could not be read."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Could not reach service: {cause}")
