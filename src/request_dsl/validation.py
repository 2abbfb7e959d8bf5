"""
Policy checks for built requests.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ErrorMessage, RequestValidationError
from .models import Request
from .types import HttpMethod

logger = logging.getLogger(__name__)

LOG_PREFIX = "[validate]"

BODY_REQUIRED_METHODS = (HttpMethod.POST, HttpMethod.PUT)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate``: the request on success, the error otherwise."""
    request: Optional[Request] = None
    error: Optional[RequestValidationError] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> Request:
        """Return the validated request or raise the validation error."""
        if self.error is not None:
            raise self.error
        return self.request


def _check(request: Request) -> Optional[RequestValidationError]:
    if not request.url.startswith("https://"):
        return RequestValidationError(ErrorMessage.HTTPS_REQUIRED)
    if request.method in BODY_REQUIRED_METHODS and request.body is None:
        return RequestValidationError(f"{request.method.value} requests should have a body")
    return None


def validate(request: Request) -> ValidationResult:
    """Check HTTPS and body presence. Never raises; the first failed rule wins."""
    error = _check(request)
    if error is not None:
        logger.debug(f"{LOG_PREFIX} {request.method} {request.url} rejected: {error}")
        return ValidationResult(error=error)
    return ValidationResult(request=request)
