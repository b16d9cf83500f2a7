"""Errors raised while building client settings from code or the environment."""
from __future__ import annotations

from purehttp.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Client settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, field_name: str | None = None) -> None:
        super().__init__(
            f"{env_key} is not set",
            detail={"env_key": env_key, "field": field_name},
        )
        self.env_key = env_key
        self.field_name = field_name


class InvalidSettingValueError(ConfigError):
    """A settings field holds a value the client cannot run with.

    ``env_key`` and ``expected`` are set when the value came from the
    environment and could not be coerced to the field type.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        field_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
        expected: str | None = None,
    ) -> None:
        source = env_key or field_name
        super().__init__(
            f"{source}={value!r}: {reason}",
            detail={
                "field": field_name,
                "value": value,
                "reason": reason,
                "env_key": env_key,
                "expected": expected,
            },
        )
        self.field_name = field_name
        self.value = value
        self.reason = reason
        self.env_key = env_key
        self.expected = expected


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
