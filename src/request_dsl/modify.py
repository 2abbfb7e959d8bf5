"""
Functional update of built requests.
"""
import logging
from typing import Any, Callable

from .core.body import BodyBuilder, JsonBuilder
from .core.headers import HeadersBuilder
from .core.request import RequestBuilder
from .core.timeout import TimeoutBuilder
from .models import JsonBody, RawBody, Request, RequestBody, TextBody

logger = logging.getLogger(__name__)

LOG_PREFIX = "[modify]"


def _reseed_body(body: RequestBody) -> Callable[[BodyBuilder], Any]:
    if isinstance(body, JsonBody):
        def reseed_json(b: BodyBuilder) -> None:
            def copy_members(j: JsonBuilder) -> None:
                for key, value in body.data.items():
                    j.set(key, value)
            b.json(copy_members)
        return reseed_json
    if isinstance(body, TextBody):
        return lambda b: b.text(body.text)
    if isinstance(body, RawBody):
        return lambda b: b.raw(body.bytes)
    raise TypeError(f"Unsupported request body type: {type(body).__name__}")


def modify(original: Request, configure: Callable[[RequestBuilder], Any]) -> Request:
    """
    Derive a new request from ``original``.

    A fresh builder is seeded with every part of ``original`` (url, method,
    headers, body variant, all three timeout fields) and then handed to
    ``configure``. Headers added by ``configure`` merge with the originals,
    a body block replaces the original body (an empty one removes it), and
    timeout fields are overridden one at a time. ``original`` is left untouched.
    """
    builder = RequestBuilder()
    builder.url(original.url)
    builder.method(original.method)

    def copy_headers(h: HeadersBuilder) -> None:
        for name, value in original.headers.items():
            h.set(name, value)
    builder.headers(copy_headers)

    if original.body is not None:
        builder.body(_reseed_body(original.body))

    def copy_timeout(t: TimeoutBuilder) -> None:
        t.connect = original.timeout.connect
        t.read = original.timeout.read
        t.write = original.timeout.write
    builder.timeout(copy_timeout)

    configure(builder)
    result = builder.build()
    logger.debug(f"{LOG_PREFIX} {original.method} {original.url} -> {result.method} {result.url}")
    return result
