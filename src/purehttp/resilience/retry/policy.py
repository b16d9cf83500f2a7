"""Resilience – RetryPolicy backed by ``tenacity``."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import tenacity as ten

from purehttp.resilience.retry.backoff import BackoffStrategy, ConstantBackoff

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]
RetryHook = Callable[[int, BaseException, float], None]


class RetryPolicy:
    """Run an async callable up to ``max_retries + 1`` times, one attempt at a time.

    Only exceptions listed in *retryable_exceptions* trigger another attempt;
    anything else propagates immediately. When the budget runs out the last
    retryable exception is re-raised unchanged.

    Parameters
    ----------
    max_retries:
        Extra attempts after the first one. ``0`` disables retrying.
    backoff:
        Delay strategy between attempts. Defaults to a 1 s ``ConstantBackoff``.
    retryable_exceptions:
        Exception types that are worth another attempt.
    """

    def __init__(
        self,
        max_retries: int = 3,
        backoff: BackoffStrategy | None = None,
        retryable_exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self.max_retries = max_retries
        self.backoff = backoff or ConstantBackoff()
        self.retryable_exceptions = retryable_exceptions

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def _wait(self, retry_state: ten.RetryCallState) -> float:
        return self.backoff.compute(retry_state.attempt_number)

    def _build_async_retrying(self, sleep: SleepFunc | None, on_retry: RetryHook | None) -> Any:
        def _before_sleep(retry_state: ten.RetryCallState) -> None:
            if on_retry is None or retry_state.outcome is None:
                return
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            on_retry(retry_state.attempt_number, retry_state.outcome.exception(), delay)

        return ten.AsyncRetrying(
            stop=ten.stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=ten.retry_if_exception_type(self.retryable_exceptions),
            sleep=sleep or asyncio.sleep,
            before_sleep=_before_sleep,
            reraise=True,
        )

    async def execute_async(
        self,
        func: Callable[[], Awaitable[T]],
        *,
        sleep: SleepFunc | None = None,
        on_retry: RetryHook | None = None,
    ) -> T:
        """Execute *func* with retry.

        *sleep* replaces ``asyncio.sleep`` for the backoff wait, which lets the
        caller make the wait interruptible. *on_retry* is called with the
        failed attempt number, its exception and the upcoming delay.
        """
        async for attempt in self._build_async_retrying(sleep, on_retry):
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["RetryPolicy"]
