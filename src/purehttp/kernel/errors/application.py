"""Application-layer errors – misuse and misconfiguration of the client."""

from __future__ import annotations

from purehttp.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
