"""Observability – structured logging helpers."""
from purehttp.observability.logging.factory import JsonLoggerFactory
from purehttp.observability.logging.filters import SensitiveFieldsFilter
from purehttp.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
