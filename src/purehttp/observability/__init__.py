"""Observability – structured logging and client events."""

from purehttp.observability.events import PROGRESS_UPDATE, EventBus, ProgressEvent
from purehttp.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = [
    "PROGRESS_UPDATE",
    "EventBus",
    "JsonLoggerFactory",
    "ProgressEvent",
    "SensitiveFieldsFilter",
    "get_logger",
]
