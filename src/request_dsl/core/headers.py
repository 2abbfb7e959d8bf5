"""
Headers builder.
"""
from types import MappingProxyType
from typing import Dict, Mapping

from ..errors import ErrorMessage, require_text


class HeadersBuilder:
    """Accumulates validated header assignments. Last write wins per name."""

    def __init__(self) -> None:
        self._headers: Dict[str, str] = {}

    def set(self, name: str, value: str) -> "HeadersBuilder":
        require_text(name, ErrorMessage.EMPTY_HEADER_NAME, ErrorMessage.BLANK_HEADER_NAME)
        require_text(value, ErrorMessage.EMPTY_HEADER_VALUE, ErrorMessage.BLANK_HEADER_VALUE)
        self._headers[name] = value
        return self

    def __setitem__(self, name: str, value: str) -> None:
        self.set(name, value)

    def update(self, headers: Mapping[str, str]) -> "HeadersBuilder":
        for name, value in headers.items():
            self.set(name, value)
        return self

    def build(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._headers))
