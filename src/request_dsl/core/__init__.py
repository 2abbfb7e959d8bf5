from .headers import HeadersBuilder
from .body import BodyBuilder, JsonBuilder
from .timeout import TimeoutBuilder
from .request import RequestBuilder, http_request, http_request_with_url

__all__ = [
    "HeadersBuilder",
    "BodyBuilder",
    "JsonBuilder",
    "TimeoutBuilder",
    "RequestBuilder",
    "http_request",
    "http_request_with_url",
]
