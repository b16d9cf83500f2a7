"""Unit tests for CancellationToken."""

from __future__ import annotations

import asyncio

import pytest

from purehttp.kernel.errors import RequestAbortedError
from purehttp.resilience.cancellation import CancellationToken


class TestCancellationToken:
    def test_starts_uncancelled(self) -> None:
        token = CancellationToken()
        assert token.cancelled is False
        token.raise_if_cancelled()

    def test_cancel_sets_flag_and_reason(self) -> None:
        token = CancellationToken()
        token.cancel("user pressed stop")
        assert token.cancelled is True
        assert token.reason == "user pressed stop"

    def test_cancel_is_idempotent(self) -> None:
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")
        assert token.reason == "first"

    def test_raise_if_cancelled(self) -> None:
        token = CancellationToken()
        token.cancel()
        with pytest.raises(RequestAbortedError) as exc_info:
            token.raise_if_cancelled()
        assert exc_info.value.message == "Request Aborted"

    def test_callbacks_run_once(self) -> None:
        token = CancellationToken()
        calls: list[str] = []
        token.on_cancel(lambda: calls.append("a"))
        token.cancel()
        token.cancel()
        assert calls == ["a"]

    def test_detached_callback_not_run(self) -> None:
        token = CancellationToken()
        calls: list[str] = []
        detach = token.on_cancel(lambda: calls.append("a"))
        detach()
        token.cancel()
        assert calls == []

    def test_callback_after_cancel_runs_immediately(self) -> None:
        token = CancellationToken()
        token.cancel()
        calls: list[str] = []
        token.on_cancel(lambda: calls.append("late"))
        assert calls == ["late"]

    def test_wait_wakes_on_cancel(self) -> None:
        async def run() -> bool:
            token = CancellationToken()
            waiter = asyncio.ensure_future(token.wait())
            await asyncio.sleep(0)
            assert not waiter.done()
            token.cancel()
            await asyncio.wait_for(waiter, timeout=1.0)
            return waiter.done()

        assert asyncio.run(run()) is True
