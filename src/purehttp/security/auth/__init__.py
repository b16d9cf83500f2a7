"""Security – Authentication strategies applied to outbound requests."""
from purehttp.security.auth.config import (
    DEFAULT_API_KEY_HEADER,
    DEFAULT_API_KEY_QUERY,
    AuthConfig,
    AuthCredentials,
    AuthType,
    InvalidAuthConfigError,
)
from purehttp.security.auth.manager import AuthManager

__all__ = [
    "DEFAULT_API_KEY_HEADER",
    "DEFAULT_API_KEY_QUERY",
    "AuthConfig",
    "AuthCredentials",
    "AuthManager",
    "AuthType",
    "InvalidAuthConfigError",
]
