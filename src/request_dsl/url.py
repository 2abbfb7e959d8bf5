"""
URL builder.
"""
from typing import Dict, List


class UrlBuilder:
    """Assemble ``base/seg1/seg2?k=v&k2=v2``.

    Segments have leading and trailing slashes stripped. Query keys keep their
    first position; a repeated key replaces its value. Nothing is encoded, and
    a separator slash is always written after ``base``, so a base ending in
    '/' yields '//' and a builder with no segments ends in '/'.
    """

    def __init__(self, base: str):
        self.base = base
        self._segments: List[str] = []
        self._query: Dict[str, str] = {}

    def segment(self, segment: str) -> "UrlBuilder":
        self._segments.append(segment.strip("/"))
        return self

    def query(self, key: str, value: str) -> "UrlBuilder":
        self._query[key] = value
        return self

    def build(self) -> str:
        path = "/".join(self._segments)
        query = ""
        if self._query:
            query = "?" + "&".join(f"{k}={v}" for k, v in self._query.items())
        return f"{self.base}/{path}{query}"
