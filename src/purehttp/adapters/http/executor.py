"""HTTP adapter – RequestExecutor.

Drives one logical request through one or more physical attempts::

    IDLE → CONNECTING → STREAMING → COMPLETED
                ↓            ↓
             RETRYING ← ─ ─ ─┘        (transport error or attempt timeout)
                ↓
            CONNECTING …  → FAILED    (retry budget exhausted)

    any phase before COMPLETED → ABORTED   (cancellation token fired)

Attempts are strictly sequential: the next one starts only after the previous
one has been torn down and the fixed backoff has elapsed.
"""
from __future__ import annotations

import asyncio
import contextlib
import json
from enum import Enum
from typing import Any

import httpx

from purehttp.adapters.http.endpoint import ResolvedEndpoint
from purehttp.adapters.http.request import HttpRequest
from purehttp.adapters.http.response import HttpResponse, collect_headers
from purehttp.config.settings import ClientSettings
from purehttp.kernel.errors import (
    HttpError,
    MalformedResponseError,
    RequestAbortedError,
    RequestTimeoutError,
    TransportError,
    normalize_error,
)
from purehttp.observability.events import PROGRESS_UPDATE, EventBus, ProgressEvent
from purehttp.observability.logging import SensitiveFieldsFilter, get_logger
from purehttp.resilience.cancellation import CancellationToken
from purehttp.resilience.retry import ConstantBackoff, RetryPolicy

_REDACTOR = SensitiveFieldsFilter()


class AttemptPhase(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    RETRYING = "retrying"
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"


class _RetriableAttemptError(Exception):
    """Attempt failed in a way another attempt may fix."""


class _AttemptTimedOut(_RetriableAttemptError):
    pass


class _AttemptFailed(_RetriableAttemptError):
    def __init__(self, original: BaseException) -> None:
        super().__init__(str(original))
        self.original = original


class _AttemptState:
    """Per-attempt progress bookkeeping; discarded when the attempt ends."""

    __slots__ = ("buffer", "loaded", "total")

    def __init__(self, total: int) -> None:
        self.buffer = bytearray()
        self.loaded = 0
        self.total = total


def _declared_length(headers: httpx.Headers) -> int:
    try:
        return max(int(headers.get("content-length", "0")), 0)
    except ValueError:
        return 0


class RequestExecutor:
    """Owns the lifecycle of a single logical request.

    Create one executor per ``execute`` call; the instance records the phase
    the request is in and how many physical attempts it took.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = "",
        settings: ClientSettings | None = None,
        events: EventBus | None = None,
    ) -> None:
        self._http = http_client
        self._base_url = base_url
        self._settings = settings or ClientSettings()
        self._events = events or EventBus()
        self._phase = AttemptPhase.IDLE
        self._log = get_logger(__name__)
        self.phases: list[AttemptPhase] = [AttemptPhase.IDLE]
        self.attempts = 0
        self.attempts_remaining = 0
        self.endpoint: ResolvedEndpoint | None = None

    @property
    def phase(self) -> AttemptPhase:
        return self._phase

    def _transition(self, phase: AttemptPhase) -> None:
        self._phase = phase
        self.phases.append(phase)
        self._log.debug("attempt.phase", phase=phase.value, attempt=self.attempts)

    async def execute(
        self,
        request: HttpRequest,
        cancel_token: CancellationToken | None = None,
    ) -> HttpResponse[Any]:
        """Send *request*, retrying transport failures and timeouts.

        Raises
        ------
        RequestAbortedError
            *cancel_token* fired before the response completed.
        RequestTimeoutError
            Every attempt ran past its deadline.
        TransportError
            The last attempt failed at the connection level.
        MalformedResponseError
            The body was not valid JSON (never retried).
        """
        self.endpoint = endpoint = ResolvedEndpoint.resolve(self._base_url, request.path, request.params)
        retries = request.retries if request.retries is not None else self._settings.retries
        timeout_ms = request.timeout if request.timeout is not None else self._settings.timeout_ms
        body, json_body = request.encode_body()
        headers = request.wire_headers(json_body)

        self.attempts_remaining = retries
        self._log = get_logger(__name__, method=request.method, url=endpoint.url)
        self._log.debug(
            "request.start",
            retries=retries,
            timeout_ms=timeout_ms,
            headers=_REDACTOR.redact(headers),
        )

        policy = RetryPolicy(
            max_retries=retries,
            backoff=ConstantBackoff(self._settings.retry_delay_seconds),
            retryable_exceptions=(_RetriableAttemptError,),
        )

        async def _sleep(delay: float) -> None:
            await self._backoff(delay, cancel_token)

        try:
            response = await policy.execute_async(
                lambda: self._run_attempt(endpoint, request, headers, body, timeout_ms / 1000.0, cancel_token),
                sleep=_sleep,
                on_retry=self._on_retry,
            )
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()
        except RequestAbortedError:
            self._transition(AttemptPhase.ABORTED)
            self._log.info("request.aborted", attempts=self.attempts)
            raise
        except _AttemptTimedOut as exc:
            self._transition(AttemptPhase.FAILED)
            self._log.warning("request.failed", reason="timeout", attempts=self.attempts)
            raise RequestTimeoutError(detail={"attempts": self.attempts, "timeout_ms": timeout_ms}) from exc
        except _AttemptFailed as exc:
            self._transition(AttemptPhase.FAILED)
            error = normalize_error(exc.original, TransportError)
            error.detail.setdefault("attempts", self.attempts)
            self._log.warning("request.failed", reason=error.message, attempts=self.attempts)
            raise error from exc.original
        except HttpError as exc:
            self._transition(AttemptPhase.FAILED)
            self._log.warning("request.failed", reason=exc.message, code=exc.code, attempts=self.attempts)
            raise
        except Exception as exc:
            self._transition(AttemptPhase.FAILED)
            error = normalize_error(exc)
            self._log.error("request.failed", reason=error.message, attempts=self.attempts)
            raise error from exc

        self._transition(AttemptPhase.COMPLETED)
        self._log.debug("request.completed", status=response.status, attempts=self.attempts)
        return response

    def _on_retry(self, attempt: int, exc: BaseException, delay: float) -> None:
        self.attempts_remaining -= 1
        reason = "timeout" if isinstance(exc, _AttemptTimedOut) else str(exc)
        self._log.info(
            "attempt.retry",
            attempt=attempt,
            reason=reason,
            delay=delay,
            attempts_remaining=self.attempts_remaining,
        )

    async def _backoff(self, delay: float, cancel_token: CancellationToken | None) -> None:
        self._transition(AttemptPhase.RETRYING)
        if cancel_token is None:
            await asyncio.sleep(delay)
            return
        if not cancel_token.cancelled:
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(cancel_token.wait(), timeout=delay)
        cancel_token.raise_if_cancelled()

    async def _run_attempt(
        self,
        endpoint: ResolvedEndpoint,
        request: HttpRequest,
        headers: dict[str, str],
        body: bytes | None,
        timeout: float,
        cancel_token: CancellationToken | None,
    ) -> HttpResponse[Any]:
        """Race one physical attempt against its deadline and the cancel token."""
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()
        self.attempts += 1
        self._transition(AttemptPhase.CONNECTING)

        attempt = asyncio.ensure_future(
            self._attempt(endpoint, request.method, headers, body, request.parse_json)
        )
        aborted: asyncio.Future[None] = asyncio.get_running_loop().create_future()

        def _abort() -> None:
            if not aborted.done():
                aborted.set_result(None)

        detach = cancel_token.on_cancel(_abort) if cancel_token is not None else None
        try:
            done, _ = await asyncio.wait(
                {attempt, aborted}, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
            # Abort wins even when the attempt finished in the same loop step.
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()
            if attempt in done:
                return attempt.result()
            raise _AttemptTimedOut(f"attempt {self.attempts} exceeded {timeout:.3f}s")
        finally:
            if detach is not None:
                detach()
            aborted.cancel()
            if not attempt.done():
                attempt.cancel()
            await asyncio.gather(attempt, return_exceptions=True)

    async def _attempt(
        self,
        endpoint: ResolvedEndpoint,
        method: str,
        headers: dict[str, str],
        body: bytes | None,
        parse_json: bool,
    ) -> HttpResponse[Any]:
        try:
            async with self._http.stream(method, endpoint.url, headers=headers, content=body) as response:
                self._transition(AttemptPhase.STREAMING)
                state = _AttemptState(_declared_length(response.headers))
                async for chunk in response.aiter_bytes():
                    state.buffer.extend(chunk)
                    state.loaded = response.num_bytes_downloaded
                    self._events.emit(PROGRESS_UPDATE, ProgressEvent.download(state.loaded, state.total))
                status = response.status_code
                response_headers = collect_headers(response.headers)
        except httpx.TimeoutException as exc:
            raise _AttemptTimedOut(str(exc) or type(exc).__name__) from exc
        except (httpx.RequestError, OSError) as exc:
            raise _AttemptFailed(exc) from exc

        return HttpResponse(
            status=status,
            headers=response_headers,
            data=self._decode(bytes(state.buffer), status, parse_json),
        )

    @staticmethod
    def _decode(body: bytes, status: int, parse_json: bool) -> Any:
        if not parse_json:
            return body
        if not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError as exc:
            raise MalformedResponseError(str(exc), status=status, cause=exc) from exc


__all__ = ["AttemptPhase", "RequestExecutor"]
