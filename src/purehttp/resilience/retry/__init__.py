"""Resilience – bounded retry with a fixed backoff."""
from purehttp.resilience.retry.backoff import BackoffStrategy, ConstantBackoff
from purehttp.resilience.retry.policy import RetryPolicy

__all__ = ["BackoffStrategy", "ConstantBackoff", "RetryPolicy"]
