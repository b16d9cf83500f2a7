"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── HttpError                (http.py) – the normalized error shape
    │   ├── TransportError
    │   ├── RequestTimeoutError
    │   ├── RequestAbortedError
    │   ├── MalformedResponseError
    │   └── InvalidRequestError
    └── ApplicationError         (application.py)

Any failure can be folded into an ``HttpError`` with :func:`normalize_error`.
"""

from purehttp.kernel.errors.application import ApplicationError
from purehttp.kernel.errors.base import BaseError
from purehttp.kernel.errors.http import (
    HttpError,
    InvalidRequestError,
    MalformedResponseError,
    RequestAbortedError,
    RequestTimeoutError,
    TransportError,
)
from purehttp.kernel.errors.normalizer import UNKNOWN_ERROR_MESSAGE, ExceptionManager, normalize_error

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExceptionManager",
    "HttpError",
    "InvalidRequestError",
    "MalformedResponseError",
    "RequestAbortedError",
    "RequestTimeoutError",
    "TransportError",
    "UNKNOWN_ERROR_MESSAGE",
    "normalize_error",
]
