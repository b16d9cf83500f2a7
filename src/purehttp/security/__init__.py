"""Security – request authentication decorators."""
from purehttp.security.auth import AuthConfig, AuthCredentials, AuthManager, AuthType, InvalidAuthConfigError

__all__ = ["AuthConfig", "AuthCredentials", "AuthManager", "AuthType", "InvalidAuthConfigError"]
