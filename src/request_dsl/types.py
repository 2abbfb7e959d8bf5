"""
Core type definitions for request-dsl.
"""
from enum import Enum
from typing import Any, Dict, Literal, Union

from .errors import ErrorMessage, PreconditionViolation


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """Accept an HttpMethod or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise PreconditionViolation(ErrorMessage.UNSUPPORTED_METHOD, repr(value))


# Body variant discriminants
BodyKind = Literal["json", "text", "raw"]

# None, bool, int, float, str, list/tuple, set/frozenset or a nested mapping.
# Not validated recursively.
JsonValue = Any
JsonData = Dict[str, JsonValue]
