"""
Adapter for httpx library.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..models import JsonBody, RawBody, Request, TextBody, Timeout, _to_plain

logger = logging.getLogger(__name__)


def _seconds(ms: Optional[int]) -> Optional[float]:
    return ms / 1000.0 if ms is not None else None


def to_httpx_timeout(timeout: Timeout) -> httpx.Timeout:
    """Millisecond ``Timeout`` to an ``httpx.Timeout`` in seconds. No pool timeout."""
    return httpx.Timeout(
        connect=_seconds(timeout.connect),
        read=_seconds(timeout.read),
        write=_seconds(timeout.write),
        pool=None,
    )


def to_httpx_request(request: Request) -> httpx.Request:
    """Build an ``httpx.Request`` for a transport to send. Nothing is sent here."""
    kwargs: Dict[str, Any] = {
        "headers": dict(request.headers),
        "extensions": {"timeout": to_httpx_timeout(request.timeout).as_dict()},
    }

    body = request.body
    if isinstance(body, JsonBody):
        kwargs["json"] = _to_plain(body.data)
    elif isinstance(body, TextBody):
        kwargs["content"] = body.text.encode("utf-8")
    elif isinstance(body, RawBody):
        kwargs["content"] = body.bytes

    logger.debug(f"Creating httpx.Request: {request.method} {request.url}")
    return httpx.Request(request.method.value, request.url, **kwargs)
