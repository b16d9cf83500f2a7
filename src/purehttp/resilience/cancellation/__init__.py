"""Resilience – caller-triggered cancellation."""
from purehttp.resilience.cancellation.token import CancellationToken

__all__ = ["CancellationToken"]
