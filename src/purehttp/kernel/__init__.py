"""Kernel – transport-agnostic building blocks."""

from purehttp.kernel.errors import (
    ApplicationError,
    BaseError,
    HttpError,
    InvalidRequestError,
    MalformedResponseError,
    RequestAbortedError,
    RequestTimeoutError,
    TransportError,
    normalize_error,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "HttpError",
    "InvalidRequestError",
    "MalformedResponseError",
    "RequestAbortedError",
    "RequestTimeoutError",
    "TransportError",
    "normalize_error",
]
