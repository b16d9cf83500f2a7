"""Resilience – CancellationToken."""
from __future__ import annotations

import asyncio
from typing import Callable

from purehttp.kernel.errors import RequestAbortedError


class CancellationToken:
    """One-shot cancellation signal shared between a caller and a request.

    ``cancel()`` may be called at any time, from any coroutine or callback on
    the loop running the request. Cancelling twice is a no-op.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._callbacks: list[Callable[[], None]] = []
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str | None = None) -> None:
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run *callback* once on cancellation; returns a function that detaches it."""
        if self.cancelled:
            callback()
            return lambda: None
        self._callbacks.append(callback)

        def detach() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return detach

    async def wait(self) -> None:
        await self._event.wait()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise RequestAbortedError(detail={"reason": self.reason} if self.reason else None)

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


__all__ = ["CancellationToken"]
