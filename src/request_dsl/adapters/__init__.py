"""
Adapters handing built requests to HTTP client libraries.
"""
from .adapter_httpx import to_httpx_request, to_httpx_timeout

__all__ = ["to_httpx_request", "to_httpx_timeout"]
