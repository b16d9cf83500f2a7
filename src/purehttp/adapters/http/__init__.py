"""HTTP adapter – retrying, cancellable async client over httpx."""
from purehttp.adapters.http.client import PureHttpClient
from purehttp.adapters.http.endpoint import ResolvedEndpoint
from purehttp.adapters.http.executor import AttemptPhase, RequestExecutor
from purehttp.adapters.http.request import HttpRequest
from purehttp.adapters.http.response import HttpResponse

__all__ = [
    "AttemptPhase",
    "HttpRequest",
    "HttpResponse",
    "PureHttpClient",
    "RequestExecutor",
    "ResolvedEndpoint",
]
