"""
Body and JSON builders.
"""
import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from ..errors import ErrorMessage, PreconditionViolation, check_state, require, require_text
from ..models import JsonBody, RawBody, RequestBody, TextBody
from ..types import JsonData, JsonValue

logger = logging.getLogger(__name__)

LOG_PREFIX = "[BodyBuilder]"


class JsonBuilder:
    """Collects JSON object members.

    Keys are validated; values are not, so a mapping passed to ``set`` keeps
    whatever keys it already has. Use ``nested`` to build a child object with
    the same key checks. Values are copied into read-only containers when the
    ``JsonBody`` is built.
    """

    def __init__(self) -> None:
        self._data: JsonData = {}

    @staticmethod
    def _check_key(key: str) -> None:
        require_text(key, ErrorMessage.EMPTY_JSON_KEY, ErrorMessage.BLANK_JSON_KEY)

    def set(self, key: str, value: JsonValue) -> "JsonBuilder":
        self._check_key(key)
        self._data[key] = value
        return self

    def __setitem__(self, key: str, value: JsonValue) -> None:
        self.set(key, value)

    def nested(self, key: str, configure: Callable[["JsonBuilder"], Any]) -> "JsonBuilder":
        self._check_key(key)
        child = JsonBuilder()
        configure(child)
        self._data[key] = child.build()
        return self

    def build(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._data))


class BodyBuilder:
    """Holds at most one body variant for a single ``body`` block."""

    def __init__(self) -> None:
        self._body: Optional[RequestBody] = None

    def _check_unset(self) -> None:
        check_state(self._body is None, ErrorMessage.BODY_SET_ONCE)

    def json(self, configure: Callable[[JsonBuilder], Any]) -> "BodyBuilder":
        self._check_unset()
        builder = JsonBuilder()
        configure(builder)
        self._body = JsonBody(builder.build())
        logger.debug(f"{LOG_PREFIX} json body with keys={list(self._body.data)}")
        return self

    def text(self, content: str) -> "BodyBuilder":
        self._check_unset()
        require_text(content, ErrorMessage.EMPTY_TEXT_CONTENT, ErrorMessage.BLANK_TEXT_CONTENT)
        self._body = TextBody(content)
        logger.debug(f"{LOG_PREFIX} text body of {len(content)} chars")
        return self

    def raw(self, content: Union[bytes, bytearray, Iterable[int]]) -> "BodyBuilder":
        self._check_unset()
        if isinstance(content, int):
            raise PreconditionViolation(ErrorMessage.INVALID_RAW_CONTENT, type(content).__name__)
        data = bytes(content)
        require(len(data) > 0, ErrorMessage.EMPTY_RAW_CONTENT)
        self._body = RawBody(data)
        logger.debug(f"{LOG_PREFIX} raw body of {len(data)} bytes")
        return self

    def build(self) -> Optional[RequestBody]:
        return self._body
