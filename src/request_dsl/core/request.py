"""
Request builder and entry points.
"""
import logging
from typing import Any, Callable, Dict, Optional, Union

from ..errors import ErrorMessage, check_state, require_text
from ..models import Request, RequestBody, Timeout
from ..types import HttpMethod
from ..url import UrlBuilder
from .body import BodyBuilder
from .headers import HeadersBuilder
from .timeout import TimeoutBuilder

logger = logging.getLogger(__name__)

LOG_PREFIX = "[RequestBuilder]"


class RequestBuilder:
    """Fluent, single-use builder for a ``Request``.

    ``headers`` blocks merge into one mapping, ``timeout`` blocks merge field
    by field, and each ``body`` block replaces the body of any earlier block,
    so a block that assigns nothing clears it.
    """

    def __init__(self) -> None:
        self._url: Optional[str] = None
        self._method: HttpMethod = HttpMethod.GET
        self._headers: Dict[str, str] = {}
        self._body: Optional[RequestBody] = None
        self._timeout: Timeout = Timeout()

    def url(self, url: str) -> "RequestBuilder":
        require_text(url, ErrorMessage.EMPTY_URL, ErrorMessage.BLANK_URL)
        self._url = url
        return self

    def method(self, method: Union[HttpMethod, str]) -> "RequestBuilder":
        self._method = HttpMethod.coerce(method)
        return self

    def headers(self, configure: Callable[[HeadersBuilder], Any]) -> "RequestBuilder":
        builder = HeadersBuilder()
        configure(builder)
        self._headers.update(builder.build())
        return self

    def body(self, configure: Callable[[BodyBuilder], Any]) -> "RequestBuilder":
        builder = BodyBuilder()
        configure(builder)
        self._body = builder.build()
        return self

    def timeout(self, configure: Callable[[TimeoutBuilder], Any]) -> "RequestBuilder":
        builder = TimeoutBuilder(self._timeout)
        configure(builder)
        self._timeout = builder.build()
        return self

    def conditional_headers(
        self, condition: bool, configure: Callable[[HeadersBuilder], Any]
    ) -> "RequestBuilder":
        if condition:
            self.headers(configure)
        return self

    def conditional_body(
        self, condition: bool, configure: Callable[[BodyBuilder], Any]
    ) -> "RequestBuilder":
        if condition:
            self.body(configure)
        return self

    def build(self) -> Request:
        check_state(self._url is not None, ErrorMessage.REQUIRED_URL)
        request = Request(
            url=self._url,
            method=self._method,
            headers=self._headers,
            body=self._body,
            timeout=self._timeout,
        )
        logger.debug(
            f"{LOG_PREFIX} Built {request.method} {request.url} "
            f"headers={len(request.headers)} body={request.body.kind if request.body else None}"
        )
        return request


def http_request(configure: Callable[[RequestBuilder], Any]) -> Request:
    """Build a request from a configuration callback.

    Example:
        >>> def configure(r):
        ...     r.url("https://api.example.com/users").method("POST")
        ...     r.body(lambda b: b.json(lambda j: j.set("name", "John")))
        >>> http_request(configure).method
        <HttpMethod.POST: 'POST'>
    """
    builder = RequestBuilder()
    configure(builder)
    return builder.build()


def http_request_with_url(
    base_url: str,
    url_configure: Callable[[UrlBuilder], Any],
    request_configure: Callable[[RequestBuilder], Any],
) -> Request:
    """Build the URL with a ``UrlBuilder`` first, then the rest of the request."""
    url_builder = UrlBuilder(base_url)
    url_configure(url_builder)
    builder = RequestBuilder().url(url_builder.build())
    request_configure(builder)
    return builder.build()
