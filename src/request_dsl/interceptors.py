"""
Request interceptors and the pipeline that chains them.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from .auth import mask_header
from .models import Request

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Interceptor]"

MAX_RETRIES_HEADER = "X-Max-Retries"


class RequestInterceptor(ABC):
    """Interceptor interface: a pure Request -> Request transform."""

    @abstractmethod
    def intercept(self, request: Request) -> Request:
        """Return the request to hand to the next interceptor."""
        ...


class LoggingInterceptor(RequestInterceptor):
    """Logs method, url and headers. Returns the request unchanged."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._log = log or logger
        self._level = level

    def intercept(self, request: Request) -> Request:
        self._log.log(self._level, f">>> Request: {request.method} {request.url}")
        for name, value in request.headers.items():
            self._log.log(self._level, f"    {name}: {mask_header(name, value)}")
        return request


class RetryInterceptor(RequestInterceptor):
    """Marks the request with the maximum number of retry attempts."""

    def __init__(self, max_retries: int = 3):
        self.max_retries = max_retries

    def intercept(self, request: Request) -> Request:
        return replace(
            request, headers={**request.headers, MAX_RETRIES_HEADER: str(self.max_retries)}
        )


class RequestPipeline:
    """Runs interceptors in the order given, each on the previous one's output."""

    def __init__(self, interceptors: Iterable[RequestInterceptor]):
        self.interceptors: Tuple[RequestInterceptor, ...] = tuple(interceptors)

    def execute(self, request: Request) -> Request:
        result = request
        for interceptor in self.interceptors:
            result = interceptor.intercept(result)
        logger.debug(f"{LOG_PREFIX} Pipeline of {len(self.interceptors)} applied to {request.url}")
        return result
