"""HTTP adapter – HttpResponse envelope."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Mapping, TypeVar

import httpx

T = TypeVar("T")

HeaderValue = str | list[str]


def collect_headers(headers: httpx.Headers) -> dict[str, HeaderValue]:
    """Flatten httpx headers, keeping repeated names as lists (names lower-cased)."""
    collected: dict[str, HeaderValue] = {}
    for name, value in headers.multi_items():
        key = name.lower()
        existing = collected.get(key)
        if existing is None:
            collected[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            collected[key] = [existing, value]
    return collected


@dataclasses.dataclass(frozen=True)
class HttpResponse(Generic[T]):
    status: int
    headers: Mapping[str, HeaderValue]
    data: T

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name.lower(), default)


__all__ = ["HeaderValue", "HttpResponse", "collect_headers"]
