"""Kernel security – default sensitive fields.

Keys are compared lower-cased, so header names such as ``Authorization`` or
``X-API-KEY`` match regardless of the caller's casing.
"""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "proxy-authorization", "x-api-key", "cookie", "set-cookie",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
