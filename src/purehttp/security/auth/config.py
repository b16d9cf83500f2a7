from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from purehttp.config.validation import ConfigError

__all__ = [
    "DEFAULT_API_KEY_HEADER",
    "DEFAULT_API_KEY_QUERY",
    "AuthConfig",
    "AuthCredentials",
    "AuthType",
    "InvalidAuthConfigError",
]

DEFAULT_API_KEY_HEADER = "X-API-KEY"
DEFAULT_API_KEY_QUERY = "api_key"


class AuthType(str, Enum):
    NONE = "none"
    BEARER = "bearer"
    BASIC = "basic"
    API_KEY_HEADER = "api_key_header"
    API_KEY_QUERY = "api_key_query"


@dataclass(frozen=True)
class AuthCredentials:
    token: str | None = None
    username: str | None = None
    password: str | None = None
    api_key: str | None = None
    header_name: str | None = None
    query_name: str | None = None


@dataclass(frozen=True)
class AuthConfig:
    """Which strategy to apply and the credentials it reads."""

    type: AuthType = AuthType.NONE
    credentials: AuthCredentials = field(default_factory=AuthCredentials)

    @classmethod
    def bearer(cls, token: str) -> "AuthConfig":
        return cls(AuthType.BEARER, AuthCredentials(token=token))

    @classmethod
    def basic(cls, username: str, password: str) -> "AuthConfig":
        return cls(AuthType.BASIC, AuthCredentials(username=username, password=password))

    @classmethod
    def api_key_header(cls, api_key: str, header_name: str | None = None) -> "AuthConfig":
        return cls(AuthType.API_KEY_HEADER, AuthCredentials(api_key=api_key, header_name=header_name))

    @classmethod
    def api_key_query(cls, api_key: str, query_name: str | None = None) -> "AuthConfig":
        return cls(AuthType.API_KEY_QUERY, AuthCredentials(api_key=api_key, query_name=query_name))


class InvalidAuthConfigError(ConfigError):
    """A credential required by the selected strategy is missing (strict mode)."""
    default_code = "invalid_auth_config"

    def __init__(self, auth_type: AuthType, missing: str) -> None:
        super().__init__(f"{auth_type.value} authentication requires '{missing}'")
        self.auth_type = auth_type
        self.missing = missing
