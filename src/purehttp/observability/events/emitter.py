from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable

from purehttp.observability.logging import get_logger

__all__ = [
    "PROGRESS_UPDATE",
    "EventBus",
    "EventHandler",
    "ProgressEvent",
]

PROGRESS_UPDATE = "progress:update"

EventHandler = Callable[[Any], None]


@dataclass(frozen=True)
class ProgressEvent:
    """Download progress of the attempt in flight.

    ``percent`` is ``None`` when the response declares no length.
    """

    type: str
    loaded: int
    total: int
    percent: int | None

    @classmethod
    def download(cls, loaded: int, total: int) -> "ProgressEvent":
        # Halves round up.
        percent = math.floor(loaded * 100 / total + 0.5) if total > 0 else None
        return cls(type="download", loaded=loaded, total=total, percent=percent)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class EventBus:
    """Synchronous observer registry keyed by event kind.

    Handlers run in the emitting task, in subscription order. A handler that
    raises is logged and skipped; it never breaks the operation that emitted.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._log = get_logger(__name__)

    def subscribe(self, kind: str, handler: EventHandler) -> Callable[[], None]:
        self._handlers.setdefault(kind, []).append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(kind, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, kind: str, event: Any) -> None:
        for handler in list(self._handlers.get(kind, ())):
            try:
                handler(event)
            except Exception:  # noqa: BLE001 – observers must not break the request
                self._log.exception("event.handler_failed", kind=kind)

    def handler_count(self, kind: str) -> int:
        return len(self._handlers.get(kind, ()))
