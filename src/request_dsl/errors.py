"""
Error kinds and exceptions raised while building requests.
"""
from enum import Enum
from typing import Optional, Union


class ErrorMessage(str, Enum):
    """Fixed, user-visible messages for every construction failure."""
    BODY_SET_ONCE = "Body can only be set once"
    EMPTY_RAW_CONTENT = "Raw body cannot be empty"
    INVALID_RAW_CONTENT = "Raw body must be bytes or a sequence of byte values"
    EMPTY_TEXT_CONTENT = "Text body cannot be empty"
    BLANK_TEXT_CONTENT = "Text body cannot be blank"
    EMPTY_JSON_KEY = "JSON key cannot be empty"
    BLANK_JSON_KEY = "JSON key cannot be blank"
    EMPTY_HEADER_NAME = "Header name cannot be empty"
    BLANK_HEADER_NAME = "Header name cannot be blank"
    EMPTY_HEADER_VALUE = "Header value cannot be empty"
    BLANK_HEADER_VALUE = "Header value cannot be blank"
    EMPTY_URL = "URL must be non-empty"
    BLANK_URL = "URL must be non-blank"
    REQUIRED_URL = "URL is required"
    NON_POSITIVE_CONNECT_TIMEOUT = "Connect timeout must be positive"
    NON_POSITIVE_READ_TIMEOUT = "Read timeout must be positive"
    NON_POSITIVE_WRITE_TIMEOUT = "Write timeout must be positive"
    NON_INTEGER_TIMEOUT = "Timeout must be an integer number of milliseconds"
    UNSUPPORTED_METHOD = "Unsupported HTTP method"
    HTTPS_REQUIRED = "URL must use HTTPS"

    def __str__(self) -> str:
        return self.value


class RequestDslError(Exception):
    """Base exception for request construction errors."""

    def __init__(self, message: Union[ErrorMessage, str], detail: Optional[str] = None):
        self.kind: Optional[ErrorMessage] = message if isinstance(message, ErrorMessage) else None
        self.detail = detail
        msg = str(message)
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.message = msg


class PreconditionViolation(RequestDslError, ValueError):
    """A single argument handed to a builder was rejected."""
    pass


class InvariantViolation(RequestDslError, RuntimeError):
    """A builder was asked to do something its current state forbids."""
    pass


class RequestValidationError(RequestDslError):
    """A built request broke a policy rule checked by ``validate``."""
    pass


def require(condition: bool, message: ErrorMessage, detail: Optional[str] = None) -> None:
    if not condition:
        raise PreconditionViolation(message, detail)


def check_state(condition: bool, message: ErrorMessage) -> None:
    if not condition:
        raise InvariantViolation(message)


def require_text(value: str, empty: ErrorMessage, blank: ErrorMessage) -> None:
    """Reject empty strings first, then whitespace-only ones."""
    require(len(value) > 0, empty)
    require(len(value.strip()) > 0, blank)
