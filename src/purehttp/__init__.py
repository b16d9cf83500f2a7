"""
purehttp – minimal async HTTP client.

Import path convention::

    from purehttp.adapters.http import HttpRequest, PureHttpClient
    from purehttp.security.auth import AuthConfig, AuthManager, AuthType
    from purehttp.resilience.cancellation import CancellationToken
    from purehttp.kernel.errors import HttpError, normalize_error
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
