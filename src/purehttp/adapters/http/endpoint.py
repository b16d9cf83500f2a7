"""HTTP adapter – ResolvedEndpoint."""
from __future__ import annotations

import dataclasses
from typing import Mapping

import httpx

from purehttp.kernel.errors import InvalidRequestError

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclasses.dataclass(frozen=True)
class ResolvedEndpoint:
    """Absolute target of a logical request; reused unchanged by every attempt."""

    scheme: str
    host: str
    port: int
    target: str

    @classmethod
    def resolve(
        cls,
        base_url: str,
        path: str = "",
        params: Mapping[str, str] | None = None,
    ) -> "ResolvedEndpoint":
        """Resolve *path* against *base_url* the way a browser resolves links."""
        try:
            url = httpx.URL(base_url).join(path or "")
            if params:
                url = url.copy_merge_params(dict(params))
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InvalidRequestError(f"Invalid URL {path!r} (base {base_url!r}): {exc}", cause=exc) from exc

        if url.scheme not in DEFAULT_PORTS:
            raise InvalidRequestError(f"Unsupported protocol {url.scheme!r} in {str(url)!r}")
        host = url.raw_host.decode("ascii")
        if not host:
            raise InvalidRequestError(f"URL {str(url)!r} has no host")

        return cls(
            scheme=url.scheme,
            host=host,
            port=url.port or DEFAULT_PORTS[url.scheme],
            target=url.raw_path.decode("ascii") or "/",
        )

    @property
    def secure(self) -> bool:
        return self.scheme == "https"

    @property
    def authority(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.authority}{self.target}"


__all__ = ["DEFAULT_PORTS", "ResolvedEndpoint"]
