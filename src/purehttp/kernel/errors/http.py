"""HTTP errors – the single error shape surfaced by the client.

Every failure of a logical request reaches the caller as an :class:`HttpError`
carrying a message and, when known, the HTTP status.
"""

from __future__ import annotations

from typing import Any

from purehttp.kernel.errors.base import BaseError

REQUEST_TIMEOUT_MESSAGE = "Request Timeout"
REQUEST_ABORTED_MESSAGE = "Request Aborted"


class HttpError(BaseError):
    """Normalized failure of a request: ``message`` plus optional ``status``."""

    default_code = "http_error"

    def __init__(self, message: str, *, status: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.status is not None:
            payload["status"] = self.status
        return payload


class TransportError(HttpError):
    """Connection-level failure (refused, reset, DNS, protocol)."""

    default_code = "transport_error"


class RequestTimeoutError(HttpError):
    """No terminal outcome within the per-attempt deadline, on every attempt."""

    default_code = "request_timeout"

    def __init__(self, message: str = REQUEST_TIMEOUT_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RequestAbortedError(HttpError):
    """The caller cancelled the request."""

    default_code = "request_aborted"

    def __init__(self, message: str = REQUEST_ABORTED_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MalformedResponseError(HttpError):
    """The response body could not be decoded. Never retried."""

    default_code = "malformed_response"


class InvalidRequestError(HttpError):
    """The request cannot be sent as described (bad URL, unsupported scheme, …)."""

    default_code = "invalid_request"


__all__ = [
    "REQUEST_ABORTED_MESSAGE",
    "REQUEST_TIMEOUT_MESSAGE",
    "HttpError",
    "InvalidRequestError",
    "MalformedResponseError",
    "RequestAbortedError",
    "RequestTimeoutError",
    "TransportError",
]
