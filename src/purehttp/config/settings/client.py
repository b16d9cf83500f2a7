"""Config settings – ClientSettings.

Defaults applied to every request that does not override them:

* ``timeout_ms`` – per-attempt deadline, 10 000 ms.
* ``retries`` – retries after the first attempt, 3.
* ``retry_delay_ms`` – fixed wait between attempts, 1 000 ms.

Environment overrides use the ``PUREHTTP_`` prefix, e.g.
``PUREHTTP_TIMEOUT_MS=2500``.
"""
from __future__ import annotations

import dataclasses
import typing

from purehttp.config.settings.base import Settings
from purehttp.config.validation import InvalidSettingValueError

DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY_MS = 1_000


@dataclasses.dataclass(frozen=True)
class ClientSettings(Settings):
    _prefix: typing.ClassVar[str] = "PUREHTTP"

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    retries: int = DEFAULT_RETRY_COUNT
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS

    def _validate(self) -> None:
        if self.timeout_ms <= 0:
            raise InvalidSettingValueError("timeout_ms", self.timeout_ms, "must be positive")
        if self.retries < 0:
            raise InvalidSettingValueError("retries", self.retries, "must not be negative")
        if self.retry_delay_ms < 0:
            raise InvalidSettingValueError("retry_delay_ms", self.retry_delay_ms, "must not be negative")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000.0


__all__ = ["DEFAULT_RETRY_COUNT", "DEFAULT_RETRY_DELAY_MS", "DEFAULT_TIMEOUT_MS", "ClientSettings"]
