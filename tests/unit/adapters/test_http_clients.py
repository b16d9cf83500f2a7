"""Unit tests – PureHttpClient facade."""
from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
import respx

from purehttp.adapters.http import HttpRequest, PureHttpClient
from purehttp.config import ClientSettings
from purehttp.kernel.errors import MalformedResponseError, RequestAbortedError, TransportError
from purehttp.observability.events import PROGRESS_UPDATE, ProgressEvent
from purehttp.resilience.cancellation import CancellationToken
from purehttp.security.auth import AuthConfig, AuthManager

FAST = ClientSettings(timeout_ms=1_000, retries=2, retry_delay_ms=0)


# ---------------------------------------------------------------------------
# send
# ---------------------------------------------------------------------------

class TestSend:
    @respx.mock
    def test_resolves_against_base_url(self) -> None:
        route = respx.get("https://api.test/v1/users").mock(
            return_value=httpx.Response(200, json=[{"id": 1}])
        )

        async def run() -> None:
            async with PureHttpClient("https://api.test/v1/", settings=FAST) as client:
                resp = await client.send(HttpRequest("GET", "users"))
            assert resp.status == 200
            assert resp.data == [{"id": 1}]
            assert route.call_count == 1

        asyncio.run(run())

    @respx.mock
    def test_caller_applies_auth_before_send(self) -> None:
        route = respx.get("https://api.test/me").mock(return_value=httpx.Response(200, json={}))
        auth = AuthManager(AuthConfig.bearer("token123"))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                await client.send(auth.apply_auth(HttpRequest("GET", "/me")))
            assert route.calls.last.request.headers["authorization"] == "Bearer token123"

        asyncio.run(run())

    @respx.mock
    def test_api_key_query_reaches_the_wire(self) -> None:
        route = respx.route(method="GET", host="api.test", path="/search").mock(
            return_value=httpx.Response(200, json={})
        )
        auth = AuthManager(AuthConfig.api_key_query("k-1"))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                await client.send(auth.apply_auth(HttpRequest("GET", "/search?q=x")))
            sent = route.calls.last.request
            assert sent.url.params["q"] == "x"
            assert sent.url.params["api_key"] == "k-1"

        asyncio.run(run())

    @respx.mock
    def test_transport_error_retried_then_normalized(self) -> None:
        route = respx.get("https://api.test/down").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                with pytest.raises(TransportError) as exc_info:
                    await client.send(HttpRequest("GET", "/down"))
            assert exc_info.value.message == "refused"
            assert route.call_count == FAST.retries + 1

        asyncio.run(run())

    @respx.mock
    def test_malformed_body_surfaces_immediately(self) -> None:
        route = respx.get("https://api.test/html").mock(return_value=httpx.Response(200, text="<html>"))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                with pytest.raises(MalformedResponseError):
                    await client.get("/html")
            assert route.call_count == 1

        asyncio.run(run())

    @respx.mock
    def test_concurrent_sends_are_independent(self) -> None:
        respx.get("https://api.test/ok").mock(return_value=httpx.Response(200, json={"ok": True}))
        respx.get("https://api.test/down").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                ok, down = await asyncio.gather(
                    client.get("/ok"),
                    client.get("/down"),
                    return_exceptions=True,
                )
            assert ok.data == {"ok": True}
            assert isinstance(down, TransportError)

        asyncio.run(run())

    @respx.mock
    def test_cancel_token_passed_through(self) -> None:
        route = respx.get("https://api.test/x").mock(return_value=httpx.Response(200, json={}))
        token = CancellationToken()
        token.cancel()

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                with pytest.raises(RequestAbortedError) as exc_info:
                    await client.get("/x", cancel_token=token)
            assert exc_info.value.message == "Request Aborted"
            assert route.call_count == 0

        asyncio.run(run())


# ---------------------------------------------------------------------------
# Convenience verbs
# ---------------------------------------------------------------------------

class TestVerbs:
    @respx.mock
    def test_post_sends_json(self) -> None:
        route = respx.post("https://api.test/items").mock(return_value=httpx.Response(201, json={"id": 7}))

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                resp = await client.post("/items", data={"name": "x"}, headers={"X-Trace": "t"})
            sent = route.calls.last.request
            assert resp.status == 201
            assert sent.content == b'{"name": "x"}'
            assert sent.headers["content-type"] == "application/json"
            assert sent.headers["x-trace"] == "t"

        asyncio.run(run())

    @pytest.mark.parametrize("verb", ["get", "put", "patch", "delete"])
    @respx.mock
    def test_verb_method(self, verb: str) -> None:
        route = respx.route(method=verb.upper(), url="https://api.test/r").mock(
            return_value=httpx.Response(200, json={})
        )

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                await getattr(client, verb)("/r")
            assert route.call_count == 1

        asyncio.run(run())


# ---------------------------------------------------------------------------
# Progress subscription
# ---------------------------------------------------------------------------

class TestProgressSubscription:
    @respx.mock
    def test_subscribe_and_unsubscribe(self) -> None:
        respx.get("https://api.test/file").mock(return_value=httpx.Response(200, json={"data": "x" * 64}))
        seen: list[ProgressEvent] = []

        async def run() -> None:
            async with PureHttpClient("https://api.test", settings=FAST) as client:
                unsubscribe = client.subscribe(PROGRESS_UPDATE, seen.append)
                await client.get("/file")
                assert seen and seen[-1].percent == 100
                count = len(seen)
                unsubscribe()
                await client.get("/file")
                assert len(seen) == count

        asyncio.run(run())


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_defaults(self) -> None:
        client = PureHttpClient("https://api.test")
        assert client.base_url == "https://api.test"
        assert client.settings == ClientSettings()
        asyncio.run(client.aclose())

    def test_injected_client_not_closed(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
            return httpx.Response(200, json={"via": "mock"})

        async def run() -> Any:
            http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
            async with PureHttpClient("https://api.test", http_client=http, settings=FAST) as client:
                resp = await client.get("/")
            assert resp.data == {"via": "mock"}
            assert http.is_closed is False
            await http.aclose()

        asyncio.run(run())

    def test_owned_client_closed(self) -> None:
        async def run() -> None:
            client = PureHttpClient("https://api.test")
            async with client:
                pass
            assert client._client.is_closed is True

        asyncio.run(run())
