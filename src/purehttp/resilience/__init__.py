"""Resilience – bounded retry and cooperative cancellation."""

from purehttp.resilience.cancellation import CancellationToken
from purehttp.resilience.retry import BackoffStrategy, ConstantBackoff, RetryPolicy

__all__ = [
    "BackoffStrategy",
    "CancellationToken",
    "ConstantBackoff",
    "RetryPolicy",
]
