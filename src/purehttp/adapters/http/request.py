"""HTTP adapter – HttpRequest descriptor."""
from __future__ import annotations

import dataclasses
import json
from types import MappingProxyType
from typing import Any, Mapping

from purehttp.kernel.errors import InvalidRequestError

JSON_CONTENT_TYPE = "application/json"


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


def merge_headers(base: Mapping[str, str], extra: Mapping[str, str]) -> dict[str, str]:
    """Overlay *extra* on *base*; a name in *extra* replaces any casing of it in *base*."""
    merged = dict(base)
    for name, value in extra.items():
        for existing in [k for k in merged if k.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(k.lower() == name.lower() for k in headers)


@dataclasses.dataclass(frozen=True)
class HttpRequest:
    """Description of one logical request.

    ``timeout`` is the per-attempt deadline in milliseconds and ``retries`` the
    number of extra attempts; ``None`` falls back to the client settings.
    ``data`` is sent as-is when it is ``str`` or ``bytes`` and JSON-encoded
    otherwise. Instances never change: the ``with_*`` helpers return copies.
    """

    method: str = "GET"
    path: str = ""
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    data: Any = None
    params: Mapping[str, str] = dataclasses.field(default_factory=dict)
    timeout: int | None = None
    retries: int | None = None
    parse_json: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", _frozen(self.headers))
        object.__setattr__(self, "params", _frozen(self.params))
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidRequestError(f"timeout must be positive, got {self.timeout}")
        if self.retries is not None and self.retries < 0:
            raise InvalidRequestError(f"retries must not be negative, got {self.retries}")

    def with_headers(self, headers: Mapping[str, str]) -> "HttpRequest":
        return dataclasses.replace(self, headers=merge_headers(self.headers, headers))

    def with_params(self, params: Mapping[str, str]) -> "HttpRequest":
        return dataclasses.replace(self, params={**self.params, **params})

    def encode_body(self) -> tuple[bytes | None, bool]:
        """Serialize ``data`` for the wire.

        Returns the payload (``None`` when there is nothing to send) and whether
        it was JSON-encoded.
        """
        if self.data is None:
            return None, False
        if isinstance(self.data, bytes):
            return self.data, False
        if isinstance(self.data, str):
            return self.data.encode("utf-8"), False
        try:
            return json.dumps(self.data).encode("utf-8"), True
        except (TypeError, ValueError) as exc:
            raise InvalidRequestError(f"Request body is not JSON serializable: {exc}", cause=exc) from exc

    def wire_headers(self, json_body: bool) -> dict[str, str]:
        headers = dict(self.headers)
        if json_body and not has_header(headers, "content-type"):
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers


__all__ = ["JSON_CONTENT_TYPE", "HttpRequest", "has_header", "merge_headers"]
