"""
Immutable request data models.

Every value here is frozen once constructed. Builders in ``request_dsl.core``
produce them; validation, interceptors and ``modify`` consume them and return
new values.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Mapping, Optional, Union

from .errors import ErrorMessage, PreconditionViolation
from .types import BodyKind, HttpMethod

if TYPE_CHECKING:
    from .core.request import RequestBuilder


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only view over a private copy of ``mapping``."""
    return MappingProxyType(dict(mapping))


def _deep_freeze(value: Any) -> Any:
    """Copy a JSON-like value into read-only containers, all the way down."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _deep_freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_deep_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_deep_freeze(v) for v in value)
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((k, _hashable(v)) for k, v in value.items())
    if isinstance(value, tuple):
        return tuple(_hashable(v) for v in value)
    return value


def _to_plain(value: Any) -> Any:
    """Convert a JSON-like value into dicts, lists and scalars."""
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(v) for v in value]
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    return value


class RequestBody:
    """Base of the body variants. Exactly one of JsonBody, TextBody, RawBody."""
    kind: BodyKind

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class JsonBody(RequestBody):
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _deep_freeze(self.data))

    def __hash__(self) -> int:
        return hash(_hashable(self.data))

    @property
    def kind(self) -> BodyKind:
        return "json"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "json", "data": _to_plain(self.data)}


@dataclass(frozen=True)
class TextBody(RequestBody):
    text: str

    @property
    def kind(self) -> BodyKind:
        return "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "text", "content": self.text}


@dataclass(frozen=True)
class RawBody(RequestBody):
    """Binary body. Compared and hashed by content."""
    bytes: Union[bytes, bytearray, Iterable[int]]

    def __post_init__(self) -> None:
        if isinstance(self.bytes, int):
            raise PreconditionViolation(ErrorMessage.INVALID_RAW_CONTENT, type(self.bytes).__name__)
        object.__setattr__(self, "bytes", bytes(self.bytes))

    @property
    def kind(self) -> BodyKind:
        return "raw"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "raw", "bytes": list(self.bytes)}


@dataclass(frozen=True)
class Timeout:
    """Per-phase timeouts in milliseconds. ``None`` means not set."""
    connect: Optional[int] = None
    read: Optional[int] = None
    write: Optional[int] = None

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {"connect": self.connect, "read": self.read, "write": self.write}


@dataclass(frozen=True)
class Request:
    """Immutable description of an HTTP request."""
    url: str
    method: HttpMethod = HttpMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[RequestBody] = None
    timeout: Timeout = field(default_factory=Timeout)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", HttpMethod.coerce(self.method))
        object.__setattr__(self, "headers", _freeze(self.headers))

    def __hash__(self) -> int:
        return hash((self.url, self.method, frozenset(self.headers.items()), self.body, self.timeout))

    def modify(self, configure: Callable[["RequestBuilder"], Any]) -> "Request":
        """Derive a new request; see ``request_dsl.modify.modify``."""
        from .modify import modify
        return modify(self, configure)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "method": self.method.value,
            "headers": dict(self.headers),
            "body": self.body.to_dict() if self.body is not None else None,
            "timeout": self.timeout.to_dict(),
        }

