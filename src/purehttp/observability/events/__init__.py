"""Observability – client events and observer registration."""
from purehttp.observability.events.emitter import (
    PROGRESS_UPDATE,
    EventBus,
    EventHandler,
    ProgressEvent,
)

__all__ = [
    "PROGRESS_UPDATE",
    "EventBus",
    "EventHandler",
    "ProgressEvent",
]
