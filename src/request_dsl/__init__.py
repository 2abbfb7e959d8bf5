"""
Request DSL - immutable HTTP request descriptions built through scoped builders
"""

from .errors import (
    ErrorMessage,
    InvariantViolation,
    PreconditionViolation,
    RequestDslError,
    RequestValidationError,
)
from .types import HttpMethod
from .models import JsonBody, RawBody, Request, RequestBody, TextBody, Timeout
from .config import RequestConfig, resolve_config
from .core import (
    BodyBuilder,
    HeadersBuilder,
    JsonBuilder,
    RequestBuilder,
    TimeoutBuilder,
    http_request,
    http_request_with_url,
)
from .url import UrlBuilder
from .modify import modify
from .validation import ValidationResult, validate
from .interceptors import LoggingInterceptor, RequestInterceptor, RequestPipeline, RetryInterceptor
from .templates import (
    AuthenticatedRequestBuilder,
    BatchRequestBuilder,
    ConfigurableRequestBuilder,
    authenticated,
    batch_requests,
)
from .adapters import to_httpx_request

__version__ = "0.1.0"

__all__ = [
    "ErrorMessage",
    "InvariantViolation",
    "PreconditionViolation",
    "RequestDslError",
    "RequestValidationError",
    "HttpMethod",
    "JsonBody",
    "RawBody",
    "Request",
    "RequestBody",
    "TextBody",
    "Timeout",
    "RequestConfig",
    "resolve_config",
    "BodyBuilder",
    "HeadersBuilder",
    "JsonBuilder",
    "RequestBuilder",
    "TimeoutBuilder",
    "http_request",
    "http_request_with_url",
    "UrlBuilder",
    "modify",
    "ValidationResult",
    "validate",
    "LoggingInterceptor",
    "RequestInterceptor",
    "RequestPipeline",
    "RetryInterceptor",
    "AuthenticatedRequestBuilder",
    "BatchRequestBuilder",
    "ConfigurableRequestBuilder",
    "authenticated",
    "batch_requests",
    "to_httpx_request",
]
