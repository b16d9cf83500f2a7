"""HTTP adapter – PureHttpClient facade."""
from __future__ import annotations

from typing import Any, Callable

import httpx

from purehttp.adapters.http.executor import RequestExecutor
from purehttp.adapters.http.request import HttpRequest
from purehttp.adapters.http.response import HttpResponse
from purehttp.config.settings import ClientSettings
from purehttp.observability.events import EventBus, EventHandler
from purehttp.resilience.cancellation import CancellationToken


class PureHttpClient:
    """Async HTTP client bound to a base address.

    Every :meth:`send` runs its own :class:`RequestExecutor`; concurrent sends
    share nothing but the base address, the settings and httpx's connection
    pool. Download progress is published on the ``progress:update`` kind::

        async with PureHttpClient("https://api.example.com") as client:
            unsubscribe = client.subscribe(PROGRESS_UPDATE, print)
            response = await client.send(HttpRequest("GET", "/users"))
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._settings = settings or ClientSettings()
        self._owns_client = http_client is None
        # Deadlines are enforced per attempt by the executor.
        self._client = http_client or httpx.AsyncClient(timeout=None)
        self._events = EventBus()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def __aenter__(self) -> "PureHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def subscribe(self, kind: str, handler: EventHandler) -> Callable[[], None]:
        """Register *handler* for *kind*; returns a callable that unregisters it."""
        return self._events.subscribe(kind, handler)

    def executor(self) -> RequestExecutor:
        return RequestExecutor(self._client, self._base_url, self._settings, self._events)

    async def send(
        self,
        request: HttpRequest,
        cancel_token: CancellationToken | None = None,
    ) -> HttpResponse[Any]:
        return await self.executor().execute(request, cancel_token)

    async def get(self, path: str, **kwargs: Any) -> HttpResponse[Any]:
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> HttpResponse[Any]:
        return await self._request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> HttpResponse[Any]:
        return await self._request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> HttpResponse[Any]:
        return await self._request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> HttpResponse[Any]:
        return await self._request("DELETE", path, **kwargs)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        cancel_token: CancellationToken | None = None,
        **fields: Any,
    ) -> HttpResponse[Any]:
        return await self.send(HttpRequest(method=method, path=path, **fields), cancel_token)


__all__ = ["PureHttpClient"]
