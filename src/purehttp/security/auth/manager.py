"""Security – AuthManager."""
from __future__ import annotations

import base64

from purehttp.adapters.http.request import HttpRequest
from purehttp.observability.logging import get_logger
from purehttp.security.auth.config import (
    DEFAULT_API_KEY_HEADER,
    DEFAULT_API_KEY_QUERY,
    AuthConfig,
    AuthType,
    InvalidAuthConfigError,
)


class AuthManager:
    """Decorate outbound requests with the configured credentials.

    ``apply_auth`` is pure: it returns a new :class:`HttpRequest` and never
    touches the one it was given. Missing credentials become empty strings
    (with a warning) unless ``strict=True``, which raises
    :class:`InvalidAuthConfigError` instead.
    """

    def __init__(self, config: AuthConfig, *, strict: bool = False) -> None:
        self._config = config
        self._strict = strict
        self._log = get_logger(__name__)

    @property
    def config(self) -> AuthConfig:
        return self._config

    def _credential(self, name: str) -> str:
        value = getattr(self._config.credentials, name)
        if value is None:
            if self._strict:
                raise InvalidAuthConfigError(self._config.type, name)
            self._log.warning("auth.credential_missing", auth_type=self._config.type.value, field=name)
            return ""
        return value

    def apply_auth(self, request: HttpRequest) -> HttpRequest:
        creds = self._config.credentials
        auth_type = AuthType(self._config.type)

        if auth_type is AuthType.BEARER:
            return request.with_headers({"Authorization": f"Bearer {self._credential('token')}"})
        if auth_type is AuthType.BASIC:
            pair = f"{self._credential('username')}:{self._credential('password')}"
            encoded = base64.b64encode(pair.encode("utf-8")).decode("ascii")
            return request.with_headers({"Authorization": f"Basic {encoded}"})
        if auth_type is AuthType.API_KEY_HEADER:
            header = creds.header_name or DEFAULT_API_KEY_HEADER
            return request.with_headers({header: self._credential("api_key")})
        if auth_type is AuthType.API_KEY_QUERY:
            name = creds.query_name or DEFAULT_API_KEY_QUERY
            return request.with_params({name: self._credential("api_key")})
        return request.with_headers({})


__all__ = ["AuthManager"]
