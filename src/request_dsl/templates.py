"""
Request templates for common patterns.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .auth import bearer_header
from .config import RequestConfig
from .core.body import BodyBuilder
from .core.headers import HeadersBuilder
from .core.request import RequestBuilder, http_request
from .core.timeout import TimeoutBuilder
from .models import Request
from .types import HttpMethod

DEFAULT_ACCEPT = "application/json"


class AuthenticatedRequestBuilder:
    """
    Builder for Bearer-authenticated requests.

    The Authorization and Accept headers are asserted first, so headers
    given through ``headers`` can override them.
    """

    def __init__(self, base_url: str, token: str):
        self._base_url = base_url
        self._token = token
        self._path = ""
        self._method: HttpMethod = HttpMethod.GET
        self._additional_headers: Dict[str, str] = {}
        self._body_configure: Optional[Callable[[BodyBuilder], Any]] = None

    def path(self, path: str) -> "AuthenticatedRequestBuilder":
        """Path appended verbatim to the base URL, e.g. ``/users/123``."""
        self._path = path
        return self

    def method(self, method: Union[HttpMethod, str]) -> "AuthenticatedRequestBuilder":
        self._method = HttpMethod.coerce(method)
        return self

    def headers(self, configure: Callable[[HeadersBuilder], Any]) -> "AuthenticatedRequestBuilder":
        builder = HeadersBuilder()
        configure(builder)
        self._additional_headers.update(builder.build())
        return self

    def body(self, configure: Callable[[BodyBuilder], Any]) -> "AuthenticatedRequestBuilder":
        self._body_configure = configure
        return self

    def build(self) -> Request:
        def configure(r: RequestBuilder) -> None:
            r.url(f"{self._base_url}{self._path}")
            r.method(self._method)
            r.headers(
                lambda h: h.update(bearer_header(self._token))
                .set("Accept", DEFAULT_ACCEPT)
                .update(self._additional_headers)
            )
            if self._body_configure is not None:
                r.body(self._body_configure)

        return http_request(configure)


def authenticated(
    base_url: str,
    token: str,
    configure: Callable[[AuthenticatedRequestBuilder], Any],
) -> Request:
    """Create a request carrying ``Authorization: Bearer <token>``."""
    builder = AuthenticatedRequestBuilder(base_url, token)
    configure(builder)
    return builder.build()


class ConfigurableRequestBuilder:
    """Builds requests on top of the defaults in a ``RequestConfig``."""

    def __init__(self, config: RequestConfig):
        self.config = config

    def build(self, configure: Callable[[RequestBuilder], Any]) -> Request:
        """Apply config defaults, then ``configure``, which may override them."""
        builder = RequestBuilder()

        def apply_timeout(t: TimeoutBuilder) -> None:
            t.connect = self.config.default_timeout
            t.read = self.config.default_timeout
        builder.timeout(apply_timeout)

        if self.config.default_headers:
            builder.headers(lambda h: h.update(self.config.default_headers))

        configure(builder)
        return builder.build()


class BatchRequestBuilder:
    """Collects independently built requests in call order."""

    def __init__(self) -> None:
        self._requests: List[Request] = []

    def request(self, configure: Callable[[RequestBuilder], Any]) -> "BatchRequestBuilder":
        self._requests.append(http_request(configure))
        return self

    def build(self) -> Tuple[Request, ...]:
        return tuple(self._requests)


def batch_requests(configure: Callable[[BatchRequestBuilder], Any]) -> Tuple[Request, ...]:
    builder = BatchRequestBuilder()
    configure(builder)
    return builder.build()
