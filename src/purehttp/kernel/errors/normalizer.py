"""Error normalizer – fold any failure value into an :class:`HttpError`."""

from __future__ import annotations

from typing import Any

from purehttp.kernel.errors.base import BaseError
from purehttp.kernel.errors.http import HttpError

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def _status_of(failure: BaseException) -> int | None:
    for attr in ("status", "status_code"):
        value = getattr(failure, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(failure, "response", None)
    value = getattr(response, "status_code", None)
    return value if isinstance(value, int) else None


def _message_of(failure: BaseException) -> str:
    if isinstance(failure, BaseError):
        return failure.message
    try:
        return str(failure)
    except Exception:  # noqa: BLE001 – a broken __str__ must not escape
        return ""


def normalize_error(failure: Any, error_cls: type[HttpError] = HttpError) -> HttpError:
    """Map *failure* to an ``HttpError`` (or *error_cls*).

    Exceptions keep their message verbatim; the status is filled in when the
    failure carries one. Values that are not exceptions, or exceptions without
    a message, become ``"Unknown error occurred"``. Never raises.
    """
    if isinstance(failure, error_cls):
        return failure
    if isinstance(failure, BaseException):
        message = _message_of(failure)
        if message:
            return error_cls(message, status=_status_of(failure), cause=failure)
        return error_cls(UNKNOWN_ERROR_MESSAGE, status=_status_of(failure), cause=failure)
    return error_cls(UNKNOWN_ERROR_MESSAGE, detail={"failure_type": type(failure).__name__})


class ExceptionManager:
    """Class-style entry point to :func:`normalize_error`."""

    @staticmethod
    def handle(error: Any) -> HttpError:
        return normalize_error(error)


__all__ = ["UNKNOWN_ERROR_MESSAGE", "ExceptionManager", "normalize_error"]
